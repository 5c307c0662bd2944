"""Process-wide settings, resolved once at startup and passed down."""

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from audioswap.errors import ConfigError


class Settings(BaseSettings):
    """Binary locations, work directory, and limits for the pipeline.

    Every field can be overridden with an ``AUDIOSWAP_``-prefixed environment
    variable (``AUDIOSWAP_WORK_DIR``, ``AUDIOSWAP_FFMPEG_BIN``, ...).
    """

    work_dir: Path = Field(default=Path("uploads"), validate_default=True)
    ffmpeg_bin: str = "ffmpeg"
    ffprobe_bin: str = "ffprobe"
    audio_format: str = Field(default="mp3", min_length=1)
    fetch_timeout: float = Field(default=60.0, gt=0)
    probe_timeout: float = Field(default=30.0, gt=0)
    transcode_timeout: float = Field(default=600.0, gt=0)
    max_upload_bytes: int = Field(default=2 * 1024 * 1024 * 1024, gt=0)  # 2 GB

    model_config = SettingsConfigDict(env_prefix="AUDIOSWAP_", env_file=".env", extra="ignore")

    @field_validator("work_dir")
    @classmethod
    def resolve_work_dir(cls, v: Path) -> Path:
        return Path(v).resolve()

    def ensure_work_dir(self) -> Path:
        self.work_dir.mkdir(parents=True, exist_ok=True)
        return self.work_dir


def load_settings() -> Settings:
    """Read settings from the environment, raising ConfigError if invalid."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
