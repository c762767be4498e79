"""URL builders for Frinkiac images, memes and API endpoints."""

from typing import TYPE_CHECKING
from urllib.parse import quote

from frinkiac.config import Settings, get_settings

if TYPE_CHECKING:
    from frinkiac.models.frinkiac import Frame


def base_url(settings: Settings | None = None) -> str:
    """Scheme and host, e.g. ``https://frinkiac.com``."""
    if settings is None:
        settings = get_settings()
    return f"{settings.frinkiac_scheme}://{settings.frinkiac_host}"


def api_url(endpoint: str, settings: Settings | None = None) -> str:
    """Absolute URL of a JSON API endpoint such as ``search`` or ``random``."""
    if settings is None:
        settings = get_settings()
    path = "/".join(part for part in (settings.frinkiac_api_path, endpoint.strip("/")) if part)
    return f"{base_url(settings)}/{path}"


def image_link(frame: "Frame", settings: Settings | None = None) -> str:
    """Link to the still image for ``frame``."""
    return f"{base_url(settings)}/meme/{frame.episode}/{frame.timestamp}.jpg"


def meme_link(frame: "Frame", caption: str, settings: Settings | None = None) -> str:
    """Link to ``frame`` rendered with ``caption`` as meme text.

    The caption is percent-encoded in full, so the newlines inserted by the
    line wrapper travel as ``%0A``.
    """
    return f"{image_link(frame, settings)}?lines={quote(caption, safe='')}"
