"""Metadata client application service."""

from __future__ import annotations

import json

from rich.markup import escape

from initializr_wizard.domain.exceptions import (
    EmptyResponseError,
    MetadataFormatError,
    NetworkError,
)
from initializr_wizard.domain.models import FieldKey, MetadataDocument
from initializr_wizard.ports.console import ConsolePort
from initializr_wizard.ports.file_system import FileSystemPort
from initializr_wizard.ports.http_client import HttpClientPort
from initializr_wizard.ports.logger import LoggerPort

METADATA_ACCEPT = (
    "application/vnd.initializr.v2.2+json, "
    "application/vnd.initializr.v2.1+json;q=0.9, "
    "application/json;q=0.8"
)


class MetadataService:
    """Application service fetching the metadata document once per run.

    The raw response is kept in a temporary file for the lifetime of the
    service; use it as a context manager so the file is removed on every
    exit path.
    """

    def __init__(
        self,
        console: ConsolePort,
        http: HttpClientPort,
        file_system: FileSystemPort,
        logger: LoggerPort,
        metadata_url: str,
    ):
        """Initialize metadata service.

        Args:
            console: Console port for user feedback
            http: HTTP port used for the metadata request
            file_system: File system port holding the temporary metadata file
            logger: Logger port
            metadata_url: Metadata endpoint
        """
        self._console = console
        self._http = http
        self._file_system = file_system
        self._logger = logger
        self._metadata_url = metadata_url
        self._metadata_path: str | None = None

    def fetch(self) -> MetadataDocument:
        """Fetch and parse the metadata document.

        Returns:
            The immutable metadata document

        Raises:
            NetworkError: If the request cannot complete
            EmptyResponseError: If the response body is empty
            MetadataFormatError: If the body is not a usable metadata document
        """
        self._console.print(
            f"Fetching Spring Initializr metadata from {escape(self._metadata_url)}...",
            style="cyan",
        )
        self._logger.debug("Requesting metadata", url=self._metadata_url)

        try:
            body = self._http.get_bytes(self._metadata_url, headers={"Accept": METADATA_ACCEPT})
        except NetworkError as e:
            raise NetworkError(
                f"Failed to download metadata. Check internet connection. ({e.message})",
                url=self._metadata_url,
            ) from e

        self._metadata_path = self._file_system.create_temp_file(
            prefix="initializr_metadata_", suffix=".json"
        )
        self._file_system.write_bytes(self._metadata_path, body)
        self._logger.debug("Metadata stored", path=self._metadata_path, size=len(body))

        if not body:
            self.close()
            raise EmptyResponseError("Downloaded metadata file is empty. Check API status.")

        return self._parse(self._file_system.read_bytes(self._metadata_path))

    def _parse(self, raw: bytes) -> MetadataDocument:
        try:
            payload = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MetadataFormatError(f"Metadata is not valid JSON: {e}") from e

        if not isinstance(payload, dict) or FieldKey.DEPENDENCIES.value not in payload:
            raise MetadataFormatError("Metadata does not contain a dependency listing.")

        document = MetadataDocument.from_payload(payload)
        self._logger.debug(
            "Metadata parsed",
            field_count=len(document.field_definitions),
            category_count=len(document.categories),
        )
        return document

    def close(self) -> None:
        """Remove the temporary metadata file. Safe to call more than once."""
        if self._metadata_path is None:
            return
        self._file_system.delete_file(self._metadata_path, missing_ok=True)
        self._logger.debug("Metadata file removed", path=self._metadata_path)
        self._metadata_path = None

    def __enter__(self) -> MetadataService:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
