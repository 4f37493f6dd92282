"""Infrastructure layer for initializr-wizard."""

from initializr_wizard.infrastructure.config import WizardSettings
from initializr_wizard.infrastructure.console_adapter import ConsoleAdapter
from initializr_wizard.infrastructure.factory import InfrastructureFactory
from initializr_wizard.infrastructure.file_system_adapter import FileSystemAdapter
from initializr_wizard.infrastructure.http_adapter import HttpClientAdapter
from initializr_wizard.infrastructure.simple_logger import SimpleLogger

__all__ = [
    "ConsoleAdapter",
    "FileSystemAdapter",
    "HttpClientAdapter",
    "InfrastructureFactory",
    "SimpleLogger",
    "WizardSettings",
]
