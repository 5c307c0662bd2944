"""FFmpeg/ffprobe subprocess helpers."""

import json
import logging
import shlex
import shutil
import subprocess
from pathlib import Path

from audioswap.config import Settings
from audioswap.errors import (
    DurationUnavailable,
    FFmpegNotFoundError,
    MuxFailed,
    ProbeFailed,
    TrimFailed,
)
from audioswap.models import TemporalWindow

logger = logging.getLogger(__name__)

# How much of ffmpeg's stderr ends up in logs and exception messages.
STDERR_TAIL = 2000


def check_ffmpeg(settings: Settings) -> None:
    """Raise FFmpegNotFoundError if the configured ffmpeg/ffprobe are missing."""
    for cmd in (settings.ffmpeg_bin, settings.ffprobe_bin):
        if shutil.which(cmd) is None:
            raise FFmpegNotFoundError(f"{cmd} not found on PATH")


def _stderr_tail(stderr: str | bytes | None) -> str:
    if not stderr:
        return ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode(errors="replace")
    return stderr[-STDERR_TAIL:]


def probe_duration(input_path: Path, settings: Settings) -> float:
    """Return the container duration of *input_path* in seconds via ffprobe."""
    cmd = [
        settings.ffprobe_bin,
        "-v", "quiet",
        "-print_format", "json",
        "-show_format",
        str(input_path),
    ]
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
            timeout=settings.probe_timeout,
        )
    except subprocess.CalledProcessError as e:
        raise ProbeFailed(
            f"ffprobe failed on {input_path} (rc={e.returncode}): {_stderr_tail(e.stderr)}"
        ) from e
    except subprocess.TimeoutExpired as e:
        raise ProbeFailed(f"ffprobe timed out after {e.timeout}s on {input_path}") from e
    except OSError as e:
        raise ProbeFailed(f"could not run {settings.ffprobe_bin}: {e}") from e

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise ProbeFailed(f"ffprobe returned malformed JSON for {input_path}") from e
    if not isinstance(data, dict):
        raise ProbeFailed(f"ffprobe returned unexpected metadata for {input_path}")

    fmt = data.get("format", {})
    if not isinstance(fmt, dict):
        raise ProbeFailed(f"ffprobe returned malformed format metadata for {input_path}")
    raw = fmt.get("duration")
    if raw is None:
        raise DurationUnavailable(f"Could not determine duration of {input_path}")
    try:
        duration = float(raw)
    except (TypeError, ValueError):
        # ffprobe reports "N/A" for streams without a known length
        raise DurationUnavailable(
            f"Could not determine duration of {input_path}: {raw!r}"
        ) from None
    if duration <= 0:
        raise DurationUnavailable(f"Non-positive duration {duration} for {input_path}")

    logger.debug("Probed %s: %.3fs", input_path, duration)
    return duration


def run_ffmpeg(
    args: list[str],
    settings: Settings,
    error_cls: type[Exception],
    label: str,
) -> None:
    """Run ffmpeg with *args*; raise *error_cls* if it fails or times out."""
    cmd = [settings.ffmpeg_bin, "-y", *args]
    logger.info("%s command: %s", label, shlex.join(cmd))
    try:
        subprocess.run(
            cmd,
            capture_output=True,
            check=True,
            timeout=settings.transcode_timeout,
        )
    except subprocess.CalledProcessError as e:
        stderr = _stderr_tail(e.stderr)
        logger.error("%s failed (rc=%s). ffmpeg stderr:\n%s", label, e.returncode, stderr)
        raise error_cls(f"{label} failed (rc={e.returncode}): {stderr}") from e
    except subprocess.TimeoutExpired as e:
        logger.error("%s timed out after %ss", label, e.timeout)
        raise error_cls(f"{label} timed out after {e.timeout}s") from e
    except OSError as e:
        logger.error("%s could not start %s: %s", label, settings.ffmpeg_bin, e)
        raise error_cls(f"could not run {settings.ffmpeg_bin}: {e}") from e
    logger.info("%s finished", label)


def _seconds(value: float) -> str:
    # ffmpeg rejects exponent notation such as "5e-05"
    return f"{value:.6f}"


def trim_audio(
    input_path: Path,
    window: TemporalWindow,
    output_path: Path,
    settings: Settings,
) -> Path:
    """Cut *window* out of the input audio and re-encode it to ``settings.audio_format``."""
    run_ffmpeg(
        [
            "-ss", _seconds(window.start),
            "-i", str(input_path),
            "-t", _seconds(window.duration),
            "-f", settings.audio_format,
            str(output_path),
        ],
        settings,
        TrimFailed,
        "Audio trim",
    )
    return output_path


def mux_audio(
    video_path: Path,
    audio_path: Path,
    output_path: Path,
    settings: Settings,
) -> Path:
    """Combine the first video stream of *video_path* with the first audio
    stream of *audio_path*.

    Video is copied as-is, audio is encoded to AAC, and the output stops at the
    end of the shorter input.
    """
    run_ffmpeg(
        [
            "-i", str(video_path),
            "-i", str(audio_path),
            "-map", "0:v:0",
            "-map", "1:a:0",
            "-c:v", "copy",
            "-c:a", "aac",
            "-shortest",
            str(output_path),
        ],
        settings,
        MuxFailed,
        "Audio/video merge",
    )
    return output_path
