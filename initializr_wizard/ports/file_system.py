"""File system port for file operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    """Port for file system operations."""

    def create_temp_file(self, prefix: str, suffix: str) -> str:
        """Create an empty temporary file.

        Args:
            prefix: File name prefix
            suffix: File name suffix

        Returns:
            Path of the created file
        """
        ...

    def read_bytes(self, path: str) -> bytes:
        """Read contents of a file.

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        ...

    def write_bytes(self, path: str, content: bytes) -> None:
        """Write binary content to a file.

        Raises:
            IOError: If unable to write file
        """
        ...

    def delete_file(self, path: str, missing_ok: bool = False) -> None:
        """Delete a file.

        Args:
            path: File path to delete
            missing_ok: If True, don't raise error if file doesn't exist

        Raises:
            FileNotFoundError: If file doesn't exist and missing_ok is False
        """
        ...
