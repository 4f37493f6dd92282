"""Factory for creating infrastructure adapters."""

from __future__ import annotations

from typing import Any

import httpx
from rich.console import Console

from initializr_wizard.infrastructure.config import WizardSettings
from initializr_wizard.infrastructure.console_adapter import ConsoleAdapter
from initializr_wizard.infrastructure.file_system_adapter import FileSystemAdapter
from initializr_wizard.infrastructure.http_adapter import HttpClientAdapter
from initializr_wizard.infrastructure.simple_logger import SimpleLogger
from initializr_wizard.ports.console import ConsolePort
from initializr_wizard.ports.file_system import FileSystemPort
from initializr_wizard.ports.http_client import HttpClientPort
from initializr_wizard.ports.logger import LoggerPort


class InfrastructureFactory:
    """Factory for creating infrastructure adapters following hexagonal architecture."""

    @staticmethod
    def create_console(console: Console | None = None) -> ConsolePort:
        """Create a console adapter.

        Args:
            console: Optional Rich console instance

        Returns:
            ConsolePort implementation
        """
        return ConsoleAdapter(console)

    @staticmethod
    def create_http_client(
        settings: WizardSettings, client: httpx.Client | None = None
    ) -> HttpClientPort:
        """Create an HTTP client adapter.

        Args:
            settings: Wizard settings providing the timeout
            client: Optional preconfigured httpx client

        Returns:
            HttpClientPort implementation
        """
        return HttpClientAdapter(client, timeout=settings.timeout)

    @staticmethod
    def create_file_system() -> FileSystemPort:
        """Create a file system adapter.

        Returns:
            FileSystemPort implementation
        """
        return FileSystemAdapter()

    @staticmethod
    def create_logger(settings: WizardSettings) -> LoggerPort:
        """Create a logger adapter.

        Args:
            settings: Wizard settings providing the log level

        Returns:
            LoggerPort implementation
        """
        return SimpleLogger(level=settings.log_level_number)

    @classmethod
    def create_all_adapters(
        cls, settings: WizardSettings, console: Console | None = None
    ) -> dict[str, Any]:
        """Create all infrastructure adapters.

        Args:
            settings: Wizard settings
            console: Optional Rich console instance

        Returns:
            Dictionary of all adapters keyed by port name
        """
        return {
            "console": cls.create_console(console),
            "http": cls.create_http_client(settings),
            "file_system": cls.create_file_system(),
            "logger": cls.create_logger(settings),
        }
