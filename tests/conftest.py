"""Shared test fixtures."""

import json
import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from audioswap.config import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(work_dir=tmp_path / "work")


class FakeMediaTools:
    """Stands in for ffprobe/ffmpeg behind ``subprocess.run``.

    ffprobe answers with a fixed duration; ffmpeg writes a small file to its
    output path (the last argument) unless told to fail.
    """

    def __init__(self, duration: float | None = 30.0, fail_on: str | None = None):
        self.duration = duration
        self.fail_on = fail_on
        self.calls: list[list[str]] = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if cmd[0].endswith("ffprobe"):
            fmt = {} if self.duration is None else {"duration": str(self.duration)}
            return MagicMock(returncode=0, stdout=json.dumps({"format": fmt}))

        step = "mux" if "-map" in cmd else "trim"
        Path(cmd[-1]).write_bytes(b"partial" if step == self.fail_on else b"media")
        if step == self.fail_on:
            raise subprocess.CalledProcessError(1, cmd, stderr=b"Invalid data found")
        return MagicMock(returncode=0)

    def ffmpeg_calls(self) -> list[list[str]]:
        return [c for c in self.calls if not c[0].endswith("ffprobe")]


def ok_response(content: bytes = b"ID3fake-mp3-bytes") -> MagicMock:
    resp = MagicMock(status_code=200, content=content)
    resp.raise_for_status.return_value = None
    return resp
