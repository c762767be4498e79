from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from frinkiac.layout.grid import RatioMode
from frinkiac.text.line_wrapper import DEFAULT_MAX_LINE_LENGTH

BASE_DIR = Path(__file__).resolve().parent.parent  # frinkiac-client/


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a working default so the client runs against the public
    Frinkiac host without a .env file. Override via environment variables
    (case-insensitive) or a .env file at the repository root.
    """

    # Web UI server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="UI server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="UI server port")

    # Upstream Frinkiac service
    frinkiac_scheme: str = Field(default="https", description="URL scheme for the Frinkiac host")
    frinkiac_host: str = Field(default="frinkiac.com", min_length=1, description="Frinkiac host name")
    frinkiac_api_path: str = Field(default="api", description="Path prefix of the JSON API")
    request_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")

    # Caption formatting
    max_line_length: int = Field(default=DEFAULT_MAX_LINE_LENGTH, ge=1, description="Meme caption line width")

    # Frame grid
    items_per_row: int = Field(default=3, ge=1, description="Frame images per grid row")
    ratio_mode: RatioMode = Field(default=RatioMode.SQUARE, description="Grid cell ratio policy")
    frame_image_width: int = Field(default=640, gt=0, description="Source frame image width in pixels")
    frame_image_height: int = Field(default=480, gt=0, description="Source frame image height in pixels")

    # Security / middleware
    cors_origins: str = Field(default="http://localhost:8000,http://127.0.0.1:8000")
    trusted_hosts: str = Field(default="localhost,127.0.0.1,testserver")

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", "frinkiac_host", mode="after")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Ensure host names are not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("host cannot be empty")
        return v

    @field_validator("frinkiac_scheme", mode="after")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        """Only http and https are supported."""
        v = v.strip().lower()
        if v not in ("http", "https"):
            raise ValueError("frinkiac_scheme must be 'http' or 'https'")
        return v

    @field_validator("frinkiac_api_path", mode="after")
    @classmethod
    def validate_api_path(cls, v: str) -> str:
        return v.strip().strip("/")

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance

    Example:
        @app.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"host": settings.frinkiac_host}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
