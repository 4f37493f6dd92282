"""Ports (interfaces) for initializr-wizard following hexagonal architecture."""

from initializr_wizard.ports.console import ConsolePort
from initializr_wizard.ports.file_system import FileSystemPort
from initializr_wizard.ports.http_client import HttpClientPort
from initializr_wizard.ports.logger import LoggerPort

__all__ = [
    "ConsolePort",
    "FileSystemPort",
    "HttpClientPort",
    "LoggerPort",
]
