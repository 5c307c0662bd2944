"""Tests for the remote audio fetcher."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from audioswap.errors import FetchFailed
from audioswap.fetch import fetch_remote_audio
from conftest import ok_response


class TestFetchRemoteAudio:
    @patch("audioswap.fetch.requests.get")
    def test_writes_body(self, mock_get, tmp_path):
        mock_get.return_value = ok_response(b"\xff\xfbaudio")
        dest = tmp_path / "clip.mp3"

        out = fetch_remote_audio("https://example.com/clip.mp3", dest, timeout=5.0)

        assert out == dest
        assert dest.read_bytes() == b"\xff\xfbaudio"
        mock_get.assert_called_once_with("https://example.com/clip.mp3", timeout=5.0)

    @patch("audioswap.fetch.requests.get")
    def test_http_error(self, mock_get, tmp_path):
        resp = MagicMock(status_code=404)
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Client Error")
        mock_get.return_value = resp
        dest = tmp_path / "clip.mp3"

        with pytest.raises(FetchFailed, match="404"):
            fetch_remote_audio("https://example.com/missing.mp3", dest)
        assert not dest.exists()

    @patch("audioswap.fetch.requests.get")
    def test_connection_error(self, mock_get, tmp_path):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(FetchFailed):
            fetch_remote_audio("https://example.com/clip.mp3", tmp_path / "clip.mp3")

    @patch("audioswap.fetch.requests.get")
    def test_timeout(self, mock_get, tmp_path):
        mock_get.side_effect = requests.exceptions.Timeout("read timed out")
        with pytest.raises(FetchFailed, match="timed out"):
            fetch_remote_audio("https://example.com/clip.mp3", tmp_path / "clip.mp3", timeout=1)

    @patch("audioswap.fetch.requests.get")
    def test_write_failure(self, mock_get, tmp_path):
        mock_get.return_value = ok_response()
        dest = tmp_path / "missing-dir" / "clip.mp3"
        with pytest.raises(FetchFailed, match="Could not write"):
            fetch_remote_audio("https://example.com/clip.mp3", dest)
