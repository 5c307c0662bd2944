"""Trim the downloaded audio, mux it over the video, and clean up."""

import logging
from pathlib import Path

from audioswap import ffutil
from audioswap.config import Settings
from audioswap.models import TemporalWindow

logger = logging.getLogger(__name__)


def remove_artifacts(*paths: Path) -> None:
    """Best-effort delete of intermediate files. Never raises."""
    for path in paths:
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("Artifact already gone: %s", path)
        except OSError as e:
            logger.warning("Could not remove artifact %s: %s", path, e)
        else:
            logger.debug("Removed artifact %s", path)


def compose(
    video_path: Path,
    raw_audio_path: Path,
    window: TemporalWindow,
    output_path: Path,
    settings: Settings,
    cropped_path: Path | None = None,
) -> Path:
    """Replace the audio of *video_path* with *window* of *raw_audio_path*.

    Both audio files are deleted before returning, whether or not the
    merge succeeded. Returns the absolute output path.
    """
    if cropped_path is None:
        cropped_path = raw_audio_path.with_name(
            f"{raw_audio_path.stem}-cropped.{settings.audio_format}"
        )
    output_path = Path(output_path).resolve()

    try:
        ffutil.trim_audio(raw_audio_path, window, cropped_path, settings)
        try:
            ffutil.mux_audio(video_path, cropped_path, output_path, settings)
        except Exception:
            # A failed mux may leave a truncated container behind.
            remove_artifacts(output_path)
            raise
    finally:
        remove_artifacts(raw_audio_path, cropped_path)

    return output_path
