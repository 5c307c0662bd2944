"""Temporal-window validation against the probed video duration."""

from audioswap.errors import InvalidWindow, WindowExceedsSource
from audioswap.models import TemporalWindow


def validate_window(video_duration: float, start: float, end: float) -> TemporalWindow:
    """Return the audio window if it fits inside the video.

    Raises:
        InvalidWindow: if *end* is not after *start*
        WindowExceedsSource: if the window is longer than the video
    """
    crop_duration = end - start
    if crop_duration <= 0:
        raise InvalidWindow()
    if crop_duration > video_duration:
        raise WindowExceedsSource(crop_duration, video_duration)
    return TemporalWindow(start=start, end=end)
