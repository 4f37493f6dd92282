"""Unit tests for InfrastructureFactory."""

import logging
from unittest.mock import MagicMock

from rich.console import Console

from initializr_wizard.infrastructure.config import WizardSettings
from initializr_wizard.infrastructure.console_adapter import ConsoleAdapter
from initializr_wizard.infrastructure.factory import InfrastructureFactory
from initializr_wizard.infrastructure.file_system_adapter import FileSystemAdapter
from initializr_wizard.infrastructure.http_adapter import HttpClientAdapter
from initializr_wizard.infrastructure.simple_logger import SimpleLogger


class TestInfrastructureFactory:
    """Test InfrastructureFactory."""

    def test_create_console_with_custom_console(self):
        """Test that a provided Rich console is wrapped."""
        # Arrange
        console = MagicMock(spec=Console)

        # Act
        adapter = InfrastructureFactory.create_console(console)

        # Assert
        assert isinstance(adapter, ConsoleAdapter)
        assert adapter._console is console

    def test_create_http_client_uses_timeout(self):
        """Test that the HTTP client honors the configured timeout."""
        # Act
        adapter = InfrastructureFactory.create_http_client(WizardSettings(timeout=7.0))

        # Assert
        try:
            assert isinstance(adapter, HttpClientAdapter)
            assert adapter._client.timeout.connect == 7.0
        finally:
            adapter.close()

    def test_create_logger_uses_level(self):
        """Test that the logger honors the configured level."""
        # Act
        logger = InfrastructureFactory.create_logger(WizardSettings(log_level="DEBUG"))

        # Assert
        assert isinstance(logger, SimpleLogger)
        assert logger.level == logging.DEBUG

    def test_create_all_adapters(self):
        """Test creating every adapter at once."""
        # Act
        adapters = InfrastructureFactory.create_all_adapters(WizardSettings())

        # Assert
        try:
            assert set(adapters) == {"console", "http", "file_system", "logger"}
            assert isinstance(adapters["console"], ConsoleAdapter)
            assert isinstance(adapters["http"], HttpClientAdapter)
            assert isinstance(adapters["file_system"], FileSystemAdapter)
            assert isinstance(adapters["logger"], SimpleLogger)
        finally:
            adapters["http"].close()
