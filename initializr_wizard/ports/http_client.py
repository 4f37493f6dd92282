"""HTTP port for talking to the project generator service."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class HttpClientPort(Protocol):
    """Port for outbound HTTP requests."""

    def get_bytes(self, url: str, headers: dict[str, str] | None = None) -> bytes:
        """Fetch a resource and return its body.

        Args:
            url: Absolute URL to fetch
            headers: Optional request headers

        Returns:
            Raw response body

        Raises:
            NetworkError: If the request fails or returns an error status
        """
        ...

    def download(self, url: str, destination: Path) -> int:
        """Stream a resource to a file, following redirects.

        Args:
            url: Absolute URL to fetch
            destination: File to write the body to

        Returns:
            Number of bytes written

        Raises:
            NetworkError: If the request fails or returns an error status;
                no partial file is left behind and an existing
                destination is kept
        """
        ...

    def close(self) -> None:
        """Release pooled connections."""
        ...
