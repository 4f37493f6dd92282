"""Application layer for initializr-wizard."""

from initializr_wizard.application.dependency_service import DependencyService
from initializr_wizard.application.download_service import DownloadService
from initializr_wizard.application.metadata_service import MetadataService
from initializr_wizard.application.prompt_service import PromptService
from initializr_wizard.application.wizard_service import WizardService

__all__ = [
    "DependencyService",
    "DownloadService",
    "MetadataService",
    "PromptService",
    "WizardService",
]
