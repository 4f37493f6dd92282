"""Pytest configuration and shared fixtures for initializr-wizard tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest

from initializr_wizard.domain.models import MetadataDocument, QueryAccumulator, WizardSession
from initializr_wizard.domain.services import FieldRegistry
from initializr_wizard.infrastructure.file_system_adapter import FileSystemAdapter
from initializr_wizard.infrastructure.config import WizardSettings


@pytest.fixture
def metadata_payload() -> dict[str, Any]:
    """A trimmed-down metadata document in the shape the server publishes.

    Returns:
        Decoded JSON payload
    """
    return {
        "_links": {"maven-project": {"href": "https://start.spring.io/starter.zip"}},
        "type": {
            "type": "action",
            "default": "maven-project",
            "values": [
                {"id": "maven-project", "name": "Maven", "description": "Generate a Maven project"},
                {"id": "gradle-project", "name": "Gradle - Groovy"},
            ],
        },
        "language": {
            "type": "single-select",
            "default": "java",
            "values": [
                {"id": "java", "name": "Java"},
                {"id": "kotlin", "name": "Kotlin"},
                {"id": "groovy", "name": "Groovy"},
            ],
        },
        "bootVersion": {
            "type": "single-select",
            "default": "3.3.4",
            "values": [
                {"id": "3.4.0-SNAPSHOT", "name": "3.4.0 (SNAPSHOT)"},
                {"id": "3.3.4", "name": "3.3.4"},
                {"id": "3.2.10", "name": "3.2.10"},
            ],
        },
        "javaVersion": {
            "type": "single-select",
            "default": "17",
            "values": [
                {"id": "23", "name": "23"},
                {"id": "21", "name": "21"},
                {"id": "17", "name": "17"},
            ],
        },
        "packaging": {
            "type": "single-select",
            "default": "jar",
            "values": [{"id": "jar", "name": "Jar"}, {"id": "war", "name": "War"}],
        },
        "groupId": {"type": "text", "default": "com.example"},
        "artifactId": {"type": "text", "default": "demo"},
        "description": {"type": "text", "default": "Demo project for Spring Boot"},
        "dependencies": {
            "type": "hierarchical-multi-select",
            "values": [
                {
                    "name": "Web",
                    "values": [
                        {"id": "web", "name": "Spring Web"},
                        {"id": "webflux", "name": "Spring Reactive Web"},
                    ],
                },
                {
                    "name": "SQL",
                    "values": [
                        {"id": "data-jpa", "name": "Spring Data JPA"},
                        {"id": "postgresql", "name": "PostgreSQL Driver"},
                    ],
                },
            ],
        },
    }


@pytest.fixture
def metadata_bytes(metadata_payload: dict[str, Any]) -> bytes:
    """Metadata payload encoded as the server would send it."""
    return json.dumps(metadata_payload).encode("utf-8")


@pytest.fixture
def metadata_document(metadata_payload: dict[str, Any]) -> MetadataDocument:
    """Parsed metadata document."""
    return MetadataDocument.from_payload(metadata_payload)


@pytest.fixture
def registry(metadata_document: MetadataDocument) -> FieldRegistry:
    """Field registry over the sample metadata."""
    return FieldRegistry(metadata_document)


@pytest.fixture
def session() -> WizardSession:
    """Empty wizard session."""
    return WizardSession()


@pytest.fixture
def accumulator() -> QueryAccumulator:
    """Empty query accumulator."""
    return QueryAccumulator()


@pytest.fixture
def mock_console() -> MagicMock:
    """Console port double; tests script answers through ``prompt.side_effect``."""
    return MagicMock()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger port double."""
    return MagicMock()


@pytest.fixture
def settings(tmp_path) -> WizardSettings:
    """Settings writing archives into a temporary directory."""
    return WizardSettings(output_dir=str(tmp_path))


@pytest.fixture
def printed():
    """Collect every message passed to ``console.print``, in call order."""

    def collect(console: MagicMock) -> list[str]:
        return [str(call.args[0]) for call in console.print.call_args_list if call.args]

    return collect


class RecordingFileSystem(FileSystemAdapter):
    """File system adapter remembering every temporary file it created."""

    def __init__(self):
        self.created: list[str] = []

    def create_temp_file(self, prefix: str, suffix: str) -> str:
        path = super().create_temp_file(prefix, suffix)
        self.created.append(path)
        return path


@pytest.fixture
def recording_file_system() -> RecordingFileSystem:
    """Real file system adapter that records the temporary files it creates."""
    return RecordingFileSystem()
