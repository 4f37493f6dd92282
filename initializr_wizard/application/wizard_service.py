"""Wizard orchestrator application service."""

from __future__ import annotations

from initializr_wizard.application.dependency_service import DependencyService
from initializr_wizard.application.download_service import DownloadService
from initializr_wizard.application.metadata_service import MetadataService
from initializr_wizard.application.prompt_service import PromptService
from initializr_wizard.domain.models import (
    FieldKey,
    MetadataDocument,
    QueryAccumulator,
    WizardOutcome,
    WizardResult,
    WizardSession,
)
from initializr_wizard.domain.services import (
    DependencyCatalog,
    FieldRegistry,
    build_download_url,
    build_query,
)
from initializr_wizard.infrastructure.config import WizardSettings
from initializr_wizard.ports.console import ConsolePort
from initializr_wizard.ports.file_system import FileSystemPort
from initializr_wizard.ports.http_client import HttpClientPort
from initializr_wizard.ports.logger import LoggerPort


class WizardService:
    """Application service running one complete wizard session.

    Order of events: fetch metadata, collect the five choice fields and the
    two text fields, derive name and package name, add the fixed
    description, collect dependencies, confirm, download.
    """

    def __init__(
        self,
        console: ConsolePort,
        http: HttpClientPort,
        file_system: FileSystemPort,
        logger: LoggerPort,
        settings: WizardSettings,
    ):
        """Initialize wizard service.

        Args:
            console: Console port for user interaction
            http: HTTP port for metadata and archive requests
            file_system: File system port for the temporary metadata file
            logger: Logger port
            settings: Wizard settings
        """
        self._console = console
        self._http = http
        self._file_system = file_system
        self._logger = logger
        self._settings = settings

    def run(self) -> WizardResult:
        """Run the wizard.

        Returns:
            The outcome, with the archive path when a download happened

        Raises:
            MetadataError: If the metadata document could not be obtained
            DownloadError: If the archive could not be downloaded
        """
        with MetadataService(
            console=self._console,
            http=self._http,
            file_system=self._file_system,
            logger=self._logger,
            metadata_url=self._settings.metadata_url,
        ) as metadata:
            document = metadata.fetch()
            return self._run_session(document)

    def _run_session(self, document: MetadataDocument) -> WizardResult:
        session = WizardSession()
        accumulator = QueryAccumulator()
        registry = FieldRegistry(
            document,
            default_group_id=self._settings.default_group_id,
            default_artifact_id=self._settings.default_artifact_id,
        )
        prompts = PromptService(self._console, registry, session, accumulator, self._logger)

        for field_key in registry.choice_fields():
            prompts.collect_choice(field_key)
        for field_key in registry.text_fields():
            prompts.collect_text(field_key)

        for field_key, value in session.derive_fields().items():
            accumulator.append(field_key, value)
        session.description = self._settings.description
        accumulator.append(FieldKey.DESCRIPTION.value, session.description)

        DependencyService(
            prompts,
            DependencyCatalog(document),
            document.categories,
            accumulator,
            self._logger,
        ).collect()

        downloads = DownloadService(prompts, self._http, self._logger, self._settings)
        if not downloads.confirm():
            self._console.print()
            self._console.print("Download cancelled by user. Exiting.", style="cyan")
            self._logger.info("Download cancelled by user")
            return WizardResult(outcome=WizardOutcome.CANCELLED)

        query = build_query(accumulator)
        archive = downloads.download(query)
        return WizardResult(
            outcome=WizardOutcome.DOWNLOADED,
            archive_path=str(archive),
            download_url=build_download_url(self._settings.download_url, query),
        )
