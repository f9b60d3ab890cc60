"""
Network fetcher for release archives and signatures.

Streams an HTTP(S) response body into a local file and hands the file back
rewound, ready for verification and extraction. There is no resume and no
retry: a failed fetch fails the command.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Optional

import requests
from requests.exceptions import RequestException

from gover.core.exceptions import FetchError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def fetch(
    url: str,
    destination: Path,
    timeout: Optional[float] = None,
) -> BinaryIO:
    """
    Download a URL to a local file and return the file rewound.

    Args:
        url: URL to download
        destination: Local path to write (created or truncated)
        timeout: Optional request timeout in seconds (default: none)

    Returns:
        Open binary file positioned at offset 0. The caller closes it.

    Raises:
        FetchError: On network error, non-2xx status or local file error

    Example:
        >>> with fetch("https://dl.google.com/go/go1.22.0.src.tar.gz", dest) as f:
        ...     header = f.read(2)
    """
    if not url:
        raise ValueError("URL cannot be empty")

    logger.info(f"Fetching {url!r}")

    destination = Path(destination)
    try:
        f = open(destination, "w+b")
    except OSError as e:
        raise FetchError(f"failed to create {destination}: {e}") from e

    try:
        _stream_to_file(url, f, timeout)
        f.seek(0)
    except RequestException as e:
        f.close()
        raise FetchError(f"failed to fetch {url}: {e}") from e
    except OSError as e:
        f.close()
        raise FetchError(f"failed to write {destination}: {e}") from e

    return f


def _stream_to_file(url: str, f: BinaryIO, timeout: Optional[float]) -> None:
    """Stream the response body of a GET request into an open file."""
    with requests.get(
        url, stream=True, timeout=timeout, allow_redirects=True
    ) as response:
        response.raise_for_status()

        written = 0
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if chunk:
                f.write(chunk)
                written += len(chunk)

    f.flush()
    logger.debug(f"Fetched {written} bytes from {url}")
