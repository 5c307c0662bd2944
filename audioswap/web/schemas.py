"""Declarative schema for the upload form fields."""

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

__all__ = ["UploadForm", "ValidationError", "describe_errors"]


class UploadForm(BaseModel):
    """Form fields sent alongside the uploaded video."""

    model_config = ConfigDict(populate_by_name=True)

    audio_url: str = Field(alias="audioUrl", min_length=1)
    filename: str = Field(min_length=1)
    audio_start_time: float = Field(alias="audioStartTime", ge=0.0, allow_inf_nan=False)
    audio_end_time: float = Field(alias="audioEndTime", ge=0.0, allow_inf_nan=False)

    @field_validator("audio_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("audioUrl must be an http(s) URL")
        return v

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("filename must not be blank")
        if "/" in v or "\\" in v:
            raise ValueError("filename must not contain path separators")
        return v


def describe_errors(exc: ValidationError) -> list[str]:
    """Flatten pydantic errors into ``"field: message"`` strings."""
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "body"
        messages.append(f"{loc}: {err['msg']}")
    return messages
