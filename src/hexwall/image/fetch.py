"""
Fetch images (local or remote) and convert them to data URIs.

Remote images are downloaded into a scoped temporary directory that is
always removed before the next item is processed.
"""

__all__ = [
    "Conversion",
    "create_http_session",
    "download",
    "data_uri_from_source",
    "convert_image",
    "convert_images",
]

import tempfile
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import requests
from loguru import logger
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import CONFIG
from ..diagnostics import Diagnostics
from ..errors import DownloadError
from .encode import data_uri_from_bytes, data_uri_from_file
from .mime import extension_of, is_url, mime_from_path


@dataclass(frozen=True)
class Conversion:
    """Outcome of converting one source: a data URI, or the source itself on failure."""

    source: str
    value: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def create_http_session() -> requests.Session:
    """
    Create an HTTP session with retry logic for image downloads.

    Transient failures (429 and 5xx) are retried with exponential backoff.
    """
    session = requests.Session()
    session.headers["User-Agent"] = CONFIG["user_agent"]

    retry_strategy = Retry(
        total=CONFIG["max_retries"],
        backoff_factor=CONFIG["retry_backoff"],
        status_forcelist=CONFIG["retry_status_codes"],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    return session


def download(
    url: str,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> bytes:
    """
    Download a URL through a temporary file and return its bytes.

    Args:
        url: http(s) URL to fetch
        session: Session to reuse (a fresh one is created and closed otherwise)
        timeout: Request timeout in seconds (defaults to CONFIG)

    Returns:
        Raw response body

    Raises:
        DownloadError: On any network or HTTP error, or a malformed URL
    """
    if timeout is None:
        timeout = CONFIG["download_timeout"]

    owns_session = session is None
    if owns_session:
        session = create_http_session()

    try:
        with tempfile.TemporaryDirectory(prefix="hexwall-") as tmp_dir:
            # Malformed URLs (bad IPv6 host, oversized label) surface as ValueError
            try:
                suffix = extension_of(url)
                target = Path(tmp_dir) / (f"download.{suffix}" if suffix else "download")

                logger.debug(f"Downloading {url} to {target}")
                with session.get(url, timeout=timeout, stream=True) as response:
                    response.raise_for_status()
                    with open(target, "wb") as fh:
                        for chunk in response.iter_content(chunk_size=CONFIG["download_chunk_size"]):
                            fh.write(chunk)
            except (requests.exceptions.RequestException, ValueError) as e:
                raise DownloadError(url, str(e)) from e

            return target.read_bytes()
    finally:
        if owns_session:
            session.close()


def data_uri_from_source(
    source: str,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> str:
    """
    Convert a local path or URL to a base64 data URI.

    For URLs the MIME type comes from the URL path (query string ignored).

    Raises:
        DownloadError: If a remote image cannot be fetched
        OSError: If a local file cannot be read
    """
    if is_url(source):
        data = download(source, session=session, timeout=timeout)
        return data_uri_from_bytes(data, mime_from_path(source))
    return data_uri_from_file(source)


def convert_image(
    source: str,
    diagnostics: Diagnostics | None = None,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> Conversion:
    """
    Convert one source, falling back to the original string on failure.

    A failure is recorded as a warning and never raised.
    """
    try:
        value = data_uri_from_source(source, session=session, timeout=timeout)
    except (DownloadError, OSError) as e:
        message = f"Failed to convert '{source}' to data URI: {e}"
        if diagnostics is None:
            logger.warning(message)
        else:
            diagnostics.warn(source, message)
        return Conversion(source=source, value=source, error=str(e))

    logger.debug(f"Converted {source} ({len(value)} chars)")
    return Conversion(source=source, value=value)


def convert_images(
    sources: Sequence[str],
    diagnostics: Diagnostics | None = None,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> list[Conversion]:
    """Convert every source in order, sharing one HTTP session across downloads."""
    owns_session = session is None and any(is_url(s) for s in sources)
    if owns_session:
        session = create_http_session()

    try:
        return [
            convert_image(s, diagnostics=diagnostics, session=session, timeout=timeout)
            for s in sources
        ]
    finally:
        if owns_session:
            session.close()
