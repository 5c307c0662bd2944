"""Remote audio download."""

import logging
from pathlib import Path

import requests

from audioswap.errors import FetchFailed

logger = logging.getLogger(__name__)


def fetch_remote_audio(url: str, dest: Path, timeout: float | None = None) -> Path:
    """GET *url* and write the whole response body to *dest*.

    The body is not inspected; anything that is not decodable audio only
    surfaces later, when ffmpeg tries to trim it.
    """
    logger.info("Downloading audio from %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise FetchFailed(f"Audio download from {url} failed: {e}") from e

    try:
        dest.write_bytes(resp.content)
    except OSError as e:
        raise FetchFailed(f"Could not write downloaded audio to {dest}: {e}") from e

    logger.info("Audio downloaded to %s (%d bytes)", dest, len(resp.content))
    return dest
