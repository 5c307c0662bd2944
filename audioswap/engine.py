"""Orchestrator — runs the probe/validate/fetch/compose pipeline for one request."""

import logging
from dataclasses import dataclass
from pathlib import Path

from audioswap import ffutil
from audioswap.composer import compose, remove_artifacts
from audioswap.config import Settings
from audioswap.errors import ClientInputError, ProcessingFailed
from audioswap.fetch import fetch_remote_audio
from audioswap.models import MergeRequest, TemporalWindow, WorkArtifacts, new_run_id
from audioswap.validation import validate_window

logger = logging.getLogger(__name__)


@dataclass
class EngineResult:
    output_path: Path
    run_id: str
    video_duration: float
    window: TemporalWindow


def merge(
    request: MergeRequest,
    settings: Settings,
    run_id: str | None = None,
) -> EngineResult:
    """Replace the audio track of the request's video with the trimmed clip.

    Args:
        request: Type-checked merge request from the upload layer.
        settings: Binary locations, work directory and timeouts.
        run_id: Identifier for artifact names; generated when omitted.

    Raises:
        ClientInputError: the window is empty or longer than the video.
        ProcessingFailed: any other failure (always a subclass or a wrapper).
    """
    run_id = run_id or new_run_id()
    artifacts: WorkArtifacts | None = None
    logger.info("[%s] Merging %s with %s", run_id, request.source_video_path, request.audio_source_url)

    try:
        artifacts = WorkArtifacts.for_run(
            settings.work_dir,
            run_id,
            request.output_base_name,
            request.audio_source_url,
            settings.audio_format,
        )
        video_path = Path(request.source_video_path).resolve()
        settings.ensure_work_dir()
        video_duration = ffutil.probe_duration(video_path, settings)
        window = validate_window(video_duration, request.audio_start, request.audio_end)

        fetch_remote_audio(
            request.audio_source_url,
            artifacts.downloaded_audio,
            timeout=settings.fetch_timeout,
        )
        output_path = compose(
            video_path,
            artifacts.downloaded_audio,
            window,
            artifacts.output_video,
            settings,
            cropped_path=artifacts.cropped_audio,
        )
    except ClientInputError as e:
        logger.info("[%s] Rejected request: %s", run_id, e)
        raise
    except ProcessingFailed:
        logger.exception("[%s] Error in video processing pipeline", run_id)
        raise
    except Exception as e:
        logger.exception("[%s] Unexpected error in video processing pipeline", run_id)
        raise ProcessingFailed(str(e)) from e
    finally:
        # compose cleans up after itself; this covers a failed download.
        if artifacts is not None:
            remove_artifacts(*artifacts.intermediates())

    logger.info("[%s] Output written to %s", run_id, output_path)
    return EngineResult(
        output_path=output_path,
        run_id=run_id,
        video_duration=video_duration,
        window=window,
    )
