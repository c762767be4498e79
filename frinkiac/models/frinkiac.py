"""Pydantic models for Frinkiac API payloads.

Frinkiac returns PascalCase JSON. Models validate from those keys (or the
snake_case field names) and serialize with field names. Scalar fields fall
back to empty values when absent, so partial payloads such as search hits
still parse. A caption always carries its episode and frame.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field

from frinkiac import links
from frinkiac.config import get_settings
from frinkiac.text.line_wrapper import caption_text


class FrinkiacModel(BaseModel):
    """Base model accepting both API keys and field names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Frame(FrinkiacModel):
    """A single video still, addressed by episode key and timestamp."""

    id: int = Field(default=0, validation_alias=AliasChoices("Id", "id"))
    episode: str = Field(default="", validation_alias=AliasChoices("Episode", "episode"))
    timestamp: int = Field(default=0, validation_alias=AliasChoices("Timestamp", "timestamp"))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def image_link(self) -> str:
        return links.image_link(self)


class Episode(FrinkiacModel):
    """Episode metadata attached to a caption."""

    id: int = Field(default=0, validation_alias=AliasChoices("Id", "id"))
    key: str = Field(default="", validation_alias=AliasChoices("Key", "key"))
    season: int = Field(default=0, validation_alias=AliasChoices("Season", "season"))
    episode_number: int = Field(default=0, validation_alias=AliasChoices("EpisodeNumber", "episode_number"))
    title: str = Field(default="", validation_alias=AliasChoices("Title", "title"))
    director: str = Field(default="", validation_alias=AliasChoices("Director", "director"))
    # Some payloads spell the writer key "Write"
    writer: str = Field(default="", validation_alias=AliasChoices("Writer", "Write", "writer"))
    original_air_date: str = Field(default="", validation_alias=AliasChoices("OriginalAirDate", "original_air_date"))
    wiki_link: str = Field(default="", validation_alias=AliasChoices("WikiLink", "wiki_link"))


class Subtitle(FrinkiacModel):
    """One subtitle line spoken around a frame."""

    id: int = Field(default=0, validation_alias=AliasChoices("Id", "id"))
    representative_timestamp: int = Field(
        default=0, validation_alias=AliasChoices("RepresentativeTimestamp", "representative_timestamp")
    )
    episode: str = Field(default="", validation_alias=AliasChoices("Episode", "episode"))
    start_timestamp: int = Field(default=0, validation_alias=AliasChoices("StartTimestamp", "start_timestamp"))
    end_timestamp: int = Field(default=0, validation_alias=AliasChoices("EndTimestamp", "end_timestamp"))
    content: str = Field(default="", validation_alias=AliasChoices("Content", "content"))
    language: str = Field(default="", validation_alias=AliasChoices("Language", "language"))


class Caption(FrinkiacModel):
    """A frame with its episode, subtitles and nearby frames."""

    episode: Episode = Field(validation_alias=AliasChoices("Episode", "episode"))
    frame: Frame = Field(validation_alias=AliasChoices("Frame", "frame"))
    subtitles: list[Subtitle] = Field(default_factory=list, validation_alias=AliasChoices("Subtitles", "subtitles"))
    nearby: list[Frame] = Field(default_factory=list, validation_alias=AliasChoices("Nearby", "nearby"))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def caption(self) -> str:
        """Subtitle text wrapped at the configured meme line width."""
        return caption_text(self.subtitles, get_settings().max_line_length)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def image_link(self) -> str:
        return links.image_link(self.frame)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def meme_link(self) -> str:
        return links.meme_link(self.frame, self.caption)
