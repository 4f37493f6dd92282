"""Download runner: final confirmation and archive download."""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from initializr_wizard.application.prompt_service import PromptService, error_message
from initializr_wizard.domain.exceptions import ConfirmationParseError, DownloadError, NetworkError
from initializr_wizard.domain.services import build_download_url, parse_confirmation
from initializr_wizard.infrastructure.config import WizardSettings
from initializr_wizard.ports.http_client import HttpClientPort
from initializr_wizard.ports.logger import LoggerPort


class DownloadService:
    """Application service asking for confirmation and fetching the archive."""

    def __init__(
        self,
        prompts: PromptService,
        http: HttpClientPort,
        logger: LoggerPort,
        settings: WizardSettings,
    ):
        """Initialize download service.

        Args:
            prompts: Prompt engine used for screen redraws
            http: HTTP port used for the archive request
            logger: Logger port
            settings: Settings providing the endpoint and output location
        """
        self._prompts = prompts
        self._console = prompts.console
        self._session = prompts.session
        self._http = http
        self._logger = logger
        self._settings = settings

    def archive_path(self) -> Path:
        """Output file for the archive, named after the artifact id."""
        stem = self._session.artifact_id or self._settings.fallback_archive_name
        return Path(self._settings.output_dir) / f"{stem}{self._settings.archive_extension}"

    def confirm(self) -> bool:
        """Ask whether to download; empty input means yes.

        Unrecognized answers redraw the whole screen with an error before
        asking again.

        Returns:
            False only when the user explicitly declines
        """
        self._render_summary()
        while True:
            answer = self._console.prompt(
                "Do you want to proceed with the download? (y/n, default: y)"
            )
            try:
                return parse_confirmation(answer)
            except ConfirmationParseError as e:
                self._logger.debug("Rejected confirmation", answer=answer)
                self._session.set_message(error_message(e.message))
                self._render_summary()

    def download(self, query: str) -> Path:
        """Download the generated project archive.

        Args:
            query: Query string built from the session

        Returns:
            Path of the written archive

        Raises:
            DownloadError: If the archive could not be fetched
        """
        url = build_download_url(self._settings.download_url, query)
        archive = self.archive_path()

        self._prompts.render_state()
        self._console.print_header("Initiating Download...")
        self._console.print(f"Final Download URL: [cyan]{escape(url)}[/cyan]")
        self._console.print()
        self._console.print(f"Downloading project to {escape(str(archive))}...", style="cyan")
        self._logger.info("Downloading archive", url=url, archive=str(archive))

        try:
            size = self._http.download(url, archive)
        except (NetworkError, OSError) as e:
            self._logger.error("Archive download failed", url=url, reason=str(e))
            raise DownloadError(url, reason=str(e)) from e

        self._logger.info("Archive written", archive=str(archive), size=size)
        location = escape(str(archive.parent))
        self._console.print_success(
            f"Success! Project downloaded as {escape(archive.name)} in {location}."
        )
        self._console.print(f"To extract: unzip {escape(archive.name)}")
        return archive

    def _render_summary(self) -> None:
        self._prompts.render_state()
        self._console.print_header("PROJECT CONFIGURATION COMPLETE!")
        self._console.print(
            "You are about to download the project with the configuration shown above."
        )
