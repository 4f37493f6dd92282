"""Unit tests for DownloadService following TDD and hexagonal architecture."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from initializr_wizard.application.download_service import DownloadService
from initializr_wizard.application.prompt_service import PromptService, error_message
from initializr_wizard.domain.exceptions import DownloadError, NetworkError

BASE_URL = "https://start.spring.io/starter.zip"


class TestDownloadService:
    """Test suite for DownloadService."""

    @pytest.fixture(autouse=True)
    def setup(self, mock_console, registry, session, accumulator, mock_logger, settings):
        """Set up test fixtures."""
        self.console = mock_console
        self.session = session
        self.settings = settings
        self.mock_http = MagicMock()
        prompts = PromptService(mock_console, registry, session, accumulator, mock_logger)
        self.service = DownloadService(prompts, self.mock_http, mock_logger, settings)

    @pytest.mark.parametrize(("answer", "expected"), [("", True), ("y", True), ("N", False)])
    def test_confirm(self, answer, expected):
        """Test recognized confirmation answers."""
        # Arrange
        self.console.prompt.side_effect = [answer]

        # Act & Assert
        assert self.service.confirm() is expected

    def test_confirm_redraws_on_unrecognized_answer(self, printed):
        """Test that a bad answer redraws the screen with an error."""
        # Arrange
        self.console.prompt.side_effect = ["maybe", "Y"]

        # Act
        confirmed = self.service.confirm()

        # Assert
        assert confirmed is True
        assert self.console.clear.call_count == 2
        assert printed(self.console).count(error_message("Please answer 'y' or 'n'.")) == 1
        self.console.print_header.assert_any_call("PROJECT CONFIGURATION COMPLETE!")

    def test_archive_path_uses_artifact_id(self):
        """Test that the archive is named after the artifact."""
        # Arrange
        self.session.artifact_id = "shop"

        # Act & Assert
        assert self.service.archive_path() == Path(self.settings.output_dir) / "shop.zip"

    def test_archive_path_fallback(self):
        """Test the fallback archive name."""
        assert self.service.archive_path() == Path(self.settings.output_dir) / "starter.zip"

    def test_download_success(self, printed):
        """Test a successful download."""
        # Arrange
        self.session.artifact_id = "shop"
        self.mock_http.download.return_value = 2048

        # Act
        archive = self.service.download("type=maven-project&artifactId=shop")

        # Assert
        assert archive == Path(self.settings.output_dir) / "shop.zip"
        self.mock_http.download.assert_called_once_with(
            f"{BASE_URL}?type=maven-project&artifactId=shop", archive
        )
        self.console.print_success.assert_called_once()
        assert "shop.zip" in self.console.print_success.call_args.args[0]
        assert "To extract: unzip shop.zip" in printed(self.console)

    def test_download_failure(self):
        """Test that transport failures become DownloadError with the URL."""
        # Arrange
        self.mock_http.download.side_effect = NetworkError("Server responded with status 500")

        # Act & Assert
        with pytest.raises(DownloadError) as exc_info:
            self.service.download("type=maven-project")

        assert exc_info.value.url == f"{BASE_URL}?type=maven-project"
        assert "status 500" in exc_info.value.message
        self.console.print_success.assert_not_called()

    def test_download_write_failure(self):
        """Test that local write errors are reported as download failures."""
        # Arrange
        self.mock_http.download.side_effect = PermissionError("read-only")

        # Act & Assert
        with pytest.raises(DownloadError):
            self.service.download("")
