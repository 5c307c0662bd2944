"""Shared data types used across audioswap."""

import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse


def new_run_id() -> str:
    """Return an identifier unique to one pipeline run.

    Epoch milliseconds keep names sortable; the uuid4 bits keep two runs
    started in the same millisecond apart.
    """
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


@dataclass
class MergeRequest:
    """An already-validated request to replace a video's audio track."""

    source_video_path: Path
    audio_source_url: str
    output_base_name: str
    audio_start: float
    audio_end: float


@dataclass(frozen=True)
class TemporalWindow:
    """A start/end time pair in seconds selecting part of the audio clip."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass
class WorkArtifacts:
    """Files created in the work directory by a single run."""

    downloaded_audio: Path
    cropped_audio: Path
    output_video: Path

    @classmethod
    def for_run(
        cls,
        work_dir: Path,
        run_id: str,
        output_base_name: str,
        audio_url: str,
        audio_format: str = "mp3",
    ) -> "WorkArtifacts":
        # Keep the remote file's extension so ffmpeg can pick the demuxer.
        ext = Path(urlparse(audio_url).path).suffix or f".{audio_format}"
        work_dir = Path(work_dir).resolve()
        return cls(
            downloaded_audio=work_dir / f"{run_id}-audio{ext}",
            cropped_audio=work_dir / f"{run_id}-cropped.{audio_format}",
            output_video=work_dir / f"{output_base_name}-{run_id}.mp4",
        )

    def intermediates(self) -> list[Path]:
        """Paths the run owns and must delete before returning."""
        return [self.downloaded_audio, self.cropped_audio]
