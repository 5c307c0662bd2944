"""
audioswap.errors - Exception taxonomy for the merge pipeline.

Client input errors carry a message meant for the caller. Everything under
ProcessingFailed is an internal failure: the caller only ever sees the
generic message, the detail goes to the log.
"""

GENERIC_FAILURE_MESSAGE = "Failed to process video"


class AudioSwapError(Exception):
    """Base exception for all audioswap errors."""

    pass


class ConfigError(AudioSwapError):
    """Configuration loading or validation error."""

    pass


class FFmpegNotFoundError(AudioSwapError, RuntimeError):
    pass


class ClientInputError(AudioSwapError, ValueError):
    """The request itself is wrong; fixing it is up to the caller."""

    pass


class InvalidWindow(ClientInputError):
    def __init__(self, message: str = "Audio end time must be after start time."):
        super().__init__(message)


class WindowExceedsSource(ClientInputError):
    """The requested audio window is longer than the source video."""

    def __init__(self, crop_duration: float, video_duration: float):
        self.crop_duration = crop_duration
        self.video_duration = video_duration
        super().__init__(
            f"The selected audio duration ({crop_duration:.2f}s) cannot be longer "
            f"than the video duration ({video_duration:.2f}s)."
        )


class ProcessingFailed(AudioSwapError):
    """Catch-all for internal failures of the pipeline."""

    public_message = GENERIC_FAILURE_MESSAGE


class ProbeFailed(ProcessingFailed):
    """ffprobe could not run or returned malformed metadata."""

    pass


class DurationUnavailable(ProcessingFailed):
    """Metadata was readable but holds no usable duration."""

    pass


class FetchFailed(ProcessingFailed):
    """Downloading the remote audio failed."""

    pass


class TrimFailed(ProcessingFailed):
    """ffmpeg failed to trim the downloaded audio."""

    pass


class MuxFailed(ProcessingFailed):
    """ffmpeg failed to combine the video with the trimmed audio."""

    pass
