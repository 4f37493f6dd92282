"""Unit tests for WizardService covering complete wizard runs."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock
from urllib.parse import parse_qsl, urlsplit

import pytest

from initializr_wizard.application.dependency_service import EXIT_TOKEN
from initializr_wizard.application.prompt_service import error_message
from initializr_wizard.application.wizard_service import WizardService
from initializr_wizard.domain.exceptions import EmptyResponseError, MetadataFormatError
from initializr_wizard.domain.models import WizardOutcome

ARCHIVE = b"PK\x03\x04fake-zip"


def write_archive(url: str, destination: Path) -> int:
    destination.write_bytes(ARCHIVE)
    return len(ARCHIVE)


class TestWizardService:
    """Test suite for WizardService."""

    @pytest.fixture(autouse=True)
    def setup(
        self, mock_console, mock_logger, settings, metadata_bytes, recording_file_system
    ):
        """Set up test fixtures."""
        self.console = mock_console
        self.settings = settings
        self.output_dir = Path(settings.output_dir)
        self.file_system = recording_file_system
        self.mock_http = MagicMock()
        self.mock_http.get_bytes.return_value = metadata_bytes
        self.mock_http.download.side_effect = write_archive
        self.service = WizardService(
            console=mock_console,
            http=self.mock_http,
            file_system=self.file_system,
            logger=mock_logger,
            settings=settings,
        )

    def answers(self, *values: str) -> None:
        self.console.prompt.side_effect = list(values)

    def test_full_run_with_duplicate_dependency(self, printed):
        """Test the documented scenario: artifact 'shop', 'web' added twice."""
        # Arrange
        self.answers(
            "1",  # build system, the document default
            "",  # language
            "",  # boot version
            "",  # java version
            "",  # packaging
            "",  # group id
            "shop",  # artifact id
            "1",  # Web category
            "web",
            "web",
            EXIT_TOKEN,
            EXIT_TOKEN,
            "",  # confirm
        )

        # Act
        result = self.service.run()

        # Assert
        assert result.outcome == WizardOutcome.DOWNLOADED
        assert result.archive_path == str(self.output_dir / "shop.zip")
        assert (self.output_dir / "shop.zip").read_bytes() == ARCHIVE

        duplicate = error_message("Warning: Skipped dependencies: web (duplicate)")
        assert printed(self.console).count(duplicate) == 1

        url = self.mock_http.download.call_args.args[0]
        assert url == result.download_url
        assert url.startswith("https://start.spring.io/starter.zip?")
        assert parse_qsl(urlsplit(url).query) == [
            ("type", "maven-project"),
            ("language", "java"),
            ("bootVersion", "3.3.4"),
            ("javaVersion", "17"),
            ("packaging", "jar"),
            ("groupId", "com.example"),
            ("artifactId", "shop"),
            ("name", "shop"),
            ("packageName", "com.example.shop"),
            ("description", "Demo project for Spring Boot"),
            ("dependencies", "web"),
        ]

    def test_run_without_dependencies(self):
        """Test that no dependencies means no dependencies parameter."""
        # Arrange
        self.answers("", "", "", "", "", "", "", EXIT_TOKEN, "y")

        # Act
        result = self.service.run()

        # Assert
        assert result.outcome == WizardOutcome.DOWNLOADED
        query = dict(parse_qsl(urlsplit(result.download_url).query))
        assert "dependencies" not in query
        assert query["packageName"] == "com.example.demo"
        assert result.archive_path == str(self.output_dir / "demo.zip")

    def test_declined_download(self):
        """Test that declining exits cleanly without a request."""
        # Arrange
        self.answers("", "", "", "", "", "", "", EXIT_TOKEN, "n")

        # Act
        result = self.service.run()

        # Assert
        assert result.outcome == WizardOutcome.CANCELLED
        assert result.archive_path is None
        self.mock_http.download.assert_not_called()
        self.console.print.assert_any_call("Download cancelled by user. Exiting.", style="cyan")
        assert list(self.output_dir.iterdir()) == []

    def test_metadata_file_removed_after_run(self):
        """Test that the temporary metadata file does not outlive the run."""
        # Arrange
        self.answers("", "", "", "", "", "", "", EXIT_TOKEN, "n")

        # Act
        self.service.run()

        # Assert
        assert len(self.file_system.created) == 1
        assert not Path(self.file_system.created[0]).exists()

    def test_metadata_file_removed_on_interrupt(self):
        """Test cleanup when the user interrupts mid-prompt."""
        # Arrange
        self.console.prompt.side_effect = KeyboardInterrupt

        # Act
        with pytest.raises(KeyboardInterrupt):
            self.service.run()

        # Assert
        assert not Path(self.file_system.created[0]).exists()

    def test_empty_metadata(self):
        """Test that empty metadata stops the run before any prompt."""
        # Arrange
        self.mock_http.get_bytes.return_value = b""

        # Act & Assert
        with pytest.raises(EmptyResponseError):
            self.service.run()

        self.console.prompt.assert_not_called()
        self.mock_http.download.assert_not_called()
        assert list(self.output_dir.iterdir()) == []
        assert not Path(self.file_system.created[0]).exists()

    def test_metadata_without_choice_values(self):
        """Test that unusable metadata fails before prompting."""
        # Arrange
        self.mock_http.get_bytes.return_value = b'{"dependencies": {"values": []}}'

        # Act & Assert
        with pytest.raises(MetadataFormatError):
            self.service.run()

        self.console.prompt.assert_not_called()
