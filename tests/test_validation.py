"""Tests for audio window validation."""

import pytest

from audioswap.errors import ClientInputError, InvalidWindow, WindowExceedsSource
from audioswap.validation import validate_window


class TestValidateWindow:
    def test_valid_window(self):
        window = validate_window(30.0, 5.0, 25.0)
        assert window.start == 5.0
        assert window.end == 25.0
        assert window.duration == 20.0

    def test_window_equal_to_video(self):
        assert validate_window(10.0, 0.0, 10.0).duration == 10.0

    @pytest.mark.parametrize("start,end", [(10.0, 10.0), (12.0, 3.0), (0.0, 0.0)])
    def test_end_not_after_start(self, start, end):
        with pytest.raises(InvalidWindow, match="end time must be after start time"):
            validate_window(30.0, start, end)

    def test_empty_window_checked_before_length(self):
        # A reversed window is reported as such even on a tiny video
        with pytest.raises(InvalidWindow):
            validate_window(0.5, 25.0, 0.0)

    def test_exceeds_source(self):
        with pytest.raises(WindowExceedsSource) as excinfo:
            validate_window(10.0, 0.0, 25.0)
        err = excinfo.value
        assert err.crop_duration == 25.0
        assert err.video_duration == 10.0
        assert "(25.00s)" in str(err)
        assert "(10.00s)" in str(err)

    def test_exceeds_source_rounds_to_two_decimals(self):
        with pytest.raises(WindowExceedsSource, match=r"\(7\.33s\).*\(7\.12s\)"):
            validate_window(7.123456, 1.0, 8.333333)

    def test_client_errors_share_base(self):
        assert issubclass(InvalidWindow, ClientInputError)
        assert issubclass(WindowExceedsSource, ClientInputError)
