"""Read puzzle and word list text from local files or HTTP URLs."""

from __future__ import annotations

from pathlib import Path

import requests

from ..core.exceptions import SourceFetchError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def is_remote(location: Path | str) -> bool:
    return isinstance(location, str) and location.lower().startswith(("http://", "https://"))


def fetch_text(url: str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    """Download ``url`` and return its body decoded as text."""

    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SourceFetchError(f"Failed to fetch {url}: {exc}") from exc
    LOGGER.info("Fetched %s (%d bytes)", url, len(response.content))
    return response.text


def read_text(location: Path | str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    """Return the text behind ``location``.

    ``http://`` and ``https://`` strings are downloaded; anything else is read
    as a UTF-8 file. File errors propagate as :class:`OSError` or
    :class:`UnicodeDecodeError` for the caller to wrap.
    """

    if is_remote(location):
        return fetch_text(str(location), timeout_seconds)
    return Path(location).read_text(encoding="utf-8")
