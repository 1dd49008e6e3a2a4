"""
Bootstrap resource loading.

This module fetches the raw text of the roster resource, either over HTTP
or from a local file.
"""

import logging
import urllib.parse
from pathlib import Path
from typing import Optional, Union

import requests

from ..config import DATA_SOURCE, FETCH_TIMEOUT
from ..errors import RosterImportError

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Fetches the bootstrap roster resource as text.

    SOURCES:
    - http:// or https:// URL: a single GET through a requests Session.
      There are no retries: a failed fetch is terminal for the session's
      auto-population, and the office stays usable for manual edits.
    - Anything else is treated as a local file path.

    ENCODING:
    The resource is always decoded as UTF-8 (a leading BOM is dropped).
    We do not trust the HTTP charset guess because servers commonly send
    text/plain without one and requests then falls back to ISO-8859-1,
    which garbles Cyrillic names and the control literals.

    Every failure (network error, non-success status, missing file, bad
    encoding) is raised as RosterImportError.

    Usage:
        loader = DataLoader()
        text = loader.fetch("https://example.org/data.txt")
        text = loader.fetch("data/data.txt")
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: float = FETCH_TIMEOUT):
        self._session = session
        self.timeout = timeout

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Accept": "text/plain"})
        return self._session

    @staticmethod
    def is_url(source: Union[str, Path]) -> bool:
        if isinstance(source, Path):
            return False
        return urllib.parse.urlparse(source).scheme in ("http", "https")

    def fetch(self, source: Optional[Union[str, Path]] = None) -> str:
        """
        Return the text of the roster resource.

        Args:
            source: URL or path; defaults to DEANERY_DATA_SOURCE / data/data.txt
        """
        source = source if source is not None else DATA_SOURCE
        try:
            remote = self.is_url(source)
        except ValueError as exc:
            raise RosterImportError(f"Invalid roster data source {source!r}: {exc}") from exc
        if remote:
            raw = self._fetch_url(str(source))
        else:
            raw = self._read_file(Path(source))
        return self._decode(raw, source)

    def _fetch_url(self, url: str) -> bytes:
        logger.info("Fetching roster from %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RosterImportError(f"Could not fetch roster data from {url}: {exc}") from exc
        return response.content

    def _read_file(self, path: Path) -> bytes:
        logger.info("Reading roster from %s", path)
        try:
            return path.read_bytes()
        except (OSError, ValueError) as exc:
            raise RosterImportError(f"Could not read roster data from {path}: {exc}") from exc

    @staticmethod
    def _decode(raw: bytes, source) -> str:
        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise RosterImportError(f"Roster data in {source} is not valid UTF-8") from exc
