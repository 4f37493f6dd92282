"""File system adapter implementation."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


class FileSystemAdapter:
    """Adapter for file system operations."""

    def create_temp_file(self, prefix: str, suffix: str) -> str:
        """Create an empty temporary file."""
        try:
            handle, path = tempfile.mkstemp(prefix=prefix, suffix=suffix)
        except Exception as e:
            raise OSError(f"Unable to create temporary file: {e}") from e
        os.close(handle)
        return path

    def read_bytes(self, path: str) -> bytes:
        """Read contents of a file."""
        try:
            return Path(path).read_bytes()
        except FileNotFoundError as e:
            raise FileNotFoundError(f"File not found: {path}") from e
        except Exception as e:
            raise OSError(f"Unable to read file {path}: {e}") from e

    def write_bytes(self, path: str, content: bytes) -> None:
        """Write binary content to a file."""
        try:
            Path(path).write_bytes(content)
        except Exception as e:
            raise OSError(f"Unable to write file {path}: {e}") from e

    def delete_file(self, path: str, missing_ok: bool = False) -> None:
        """Delete a file."""
        try:
            Path(path).unlink(missing_ok=missing_ok)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"File not found: {path}") from e
        except Exception as e:
            raise OSError(f"Unable to delete file {path}: {e}") from e
