"""Blocking HTTP helpers for fetching text and downloading files."""

from __future__ import annotations

import functools
import shutil
import sys
from pathlib import Path
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

USER_AGENT = "buraq/1.0"


class NetworkError(Exception):
    """Raised when a request cannot be completed."""


class Network:
    """Performs HTTP requests for the application."""

    def __init__(self, timeout: float | None = 30.0) -> None:
        self.timeout = timeout

    def http_get(self, url: str) -> str:
        """Fetch a URL and return its body.

        Transport failures raise NetworkError; a non-200 status is reported on
        stderr and its body is still returned.
        """
        request = Request(url, method="GET", headers={"User-Agent": USER_AGENT})
        try:
            with urlopen(request, timeout=self.timeout) as response:
                status = response.status
                body = response.read()
        except HTTPError as exc:
            status = exc.code
            body = exc.read()
        except (URLError, OSError, ValueError) as exc:
            print(f"HTTP GET failed for URL {url}: {exc}", file=sys.stderr)
            raise NetworkError("Status not OK!") from exc

        text = body.decode("utf-8", errors="replace")
        if status != 200:
            print(f"HTTP GET request to {url} returned HTTP code {status}", file=sys.stderr)
            print(f"Response body: {text}", file=sys.stderr)
        return text

    def download_file(self, url: str, filename: Path | str) -> int:
        """Download a URL into a file, following redirects; return the bytes written.

        Any HTTP status of 400 or above, transport failure or write failure
        raises NetworkError.
        """
        try:
            output = open(filename, "wb")
        except OSError as exc:
            print(f"Error: Cannot open file for writing: {filename}", file=sys.stderr)
            raise NetworkError(f"Cannot open file for writing: {filename}") from exc

        request = Request(url, headers={"User-Agent": USER_AGENT})
        with output:
            try:
                with urlopen(request, timeout=self.timeout) as response:
                    status = response.status
                    shutil.copyfileobj(response, output)
                    written = output.tell()
            except HTTPError as exc:
                print(f"Download failed: HTTP {exc.code}", file=sys.stderr)
                raise NetworkError(f"HTTP error {exc.code} for {url}") from exc
            except (URLError, OSError, ValueError) as exc:
                print(f"Download failed: {exc}", file=sys.stderr)
                raise NetworkError(f"Download of {url} failed: {exc}") from exc

        if status == 200:
            print("Download successful!")
        else:
            print(f"Download completed with HTTP status code: {status}")
        return written


@functools.lru_cache(maxsize=None)
def get_network() -> Network:
    """Return the shared Network instance."""
    return Network()