"""HTTP client adapter implementation using httpx."""

from __future__ import annotations

from pathlib import Path

import httpx

from initializr_wizard.domain.exceptions import NetworkError


class HttpClientAdapter:
    """Adapter for synchronous HTTP requests using httpx."""

    def __init__(self, client: httpx.Client | None = None, timeout: float = 30.0):
        """Initialize HTTP adapter.

        Args:
            client: Optional preconfigured httpx client
            timeout: Request timeout in seconds, used when no client is given
        """
        self._client = client or httpx.Client(timeout=timeout)

    def get_bytes(self, url: str, headers: dict[str, str] | None = None) -> bytes:
        """Fetch a resource and return its body."""
        try:
            response = self._client.get(url, headers=headers, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"Server responded with status {e.response.status_code}", url=url
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}", url=url) from e
        return response.content

    def download(self, url: str, destination: Path) -> int:
        """Stream a resource to a file, following redirects.

        The body is written to a sibling ``.part`` file that replaces the
        destination only once the transfer completed; a failed request leaves
        any existing destination untouched.
        """
        partial = destination.with_name(f"{destination.name}.part")
        written = 0
        try:
            with self._client.stream("GET", url, follow_redirects=True) as response:
                response.raise_for_status()
                with partial.open("wb") as archive:
                    for chunk in response.iter_bytes():
                        archive.write(chunk)
                        written += len(chunk)
            partial.replace(destination)
        except httpx.HTTPStatusError as e:
            partial.unlink(missing_ok=True)
            raise NetworkError(
                f"Server responded with status {e.response.status_code}", url=url
            ) from e
        except httpx.HTTPError as e:
            partial.unlink(missing_ok=True)
            raise NetworkError(f"Request failed: {e}", url=url) from e
        except OSError:
            partial.unlink(missing_ok=True)
            raise
        return written

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()
