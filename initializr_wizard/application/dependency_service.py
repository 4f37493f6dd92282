"""Dependency selector: two-level category/dependency menus."""

from __future__ import annotations

from rich.markup import escape

from initializr_wizard.application.prompt_service import (
    PromptService,
    error_message,
    success_message,
)
from initializr_wizard.domain.models import (
    DependencyCategory,
    DependencySelectionResult,
    FieldKey,
    QueryAccumulator,
)
from initializr_wizard.domain.services import DependencyCatalog, parse_index
from initializr_wizard.ports.logger import LoggerPort

EXIT_TOKEN = "0"


class DependencyService:
    """Application service collecting dependencies into the session.

    The exit token ``0`` never collides with a 1-based menu index; it ends
    dependency collection from the category menu and returns to the category
    menu from a dependency list.
    """

    def __init__(
        self,
        prompts: PromptService,
        catalog: DependencyCatalog,
        categories: list[DependencyCategory],
        accumulator: QueryAccumulator,
        logger: LoggerPort,
    ):
        self._prompts = prompts
        self._console = prompts.console
        self._session = prompts.session
        self._catalog = catalog
        self._categories = categories
        self._accumulator = accumulator
        self._logger = logger

    def collect(self) -> list[str]:
        """Run the category menu until the user exits, then record the selection.

        Returns:
            The selected dependency ids in selection order
        """
        while True:
            self._prompts.render_state()
            self._console.print_header("Dependency Selection")
            self._console.print()
            self._console.print("--- Dependency Categories ---", style="yellow")
            self._console.print(f"  {EXIT_TOKEN}) Done (Exit dependency selection)", style="cyan")
            for position, category in enumerate(self._categories, start=1):
                self._console.print(f"  {position}) {escape(category.name)}")

            answer = self._console.prompt(
                f"Select a category number (1-{len(self._categories)}) "
                f"or {EXIT_TOKEN} to finish"
            )
            if answer == EXIT_TOKEN:
                break

            index = parse_index(answer, len(self._categories))
            if index is None:
                self._logger.debug("Rejected category", answer=answer)
                self._session.set_message(
                    error_message("Invalid category selection. Please try again.")
                )
                continue

            self._collect_from_category(self._categories[index - 1])

        if self._session.dependencies:
            self._accumulator.append(
                FieldKey.DEPENDENCIES.value, ",".join(self._session.dependencies)
            )
        return list(self._session.dependencies)

    def _collect_from_category(self, category: DependencyCategory) -> None:
        ids = [entry.id for entry in category.values]

        while True:
            self._prompts.render_state()
            self._console.print(f"--- Dependencies in {escape(category.name)} ---", style="yellow")
            self._console.print(f"  {EXIT_TOKEN}) Back to Categories", style="cyan")
            for position, entry in enumerate(category.values, start=1):
                self._console.print(f"  {position}) {escape(entry.label)} ({escape(entry.id)})")

            self._console.print()
            self._console.print("Type dependency IDs (comma-separated), or select by number.")
            answer = self._console.prompt(f"Select ID(s) or {EXIT_TOKEN} to go back")
            if answer == EXIT_TOKEN:
                return

            result = self._catalog.select(answer, ids, self._session)
            if not result.is_empty:
                self._session.set_message(self._summarize(result))

    def _summarize(self, result: DependencySelectionResult) -> str:
        lines: list[str] = []
        if result.accepted:
            lines.append(success_message(f"Added dependencies: {','.join(result.accepted)}"))
        if result.rejected:
            skipped = ",".join(str(rejection) for rejection in result.rejected)
            lines.append(error_message(f"Warning: Skipped dependencies: {skipped}"))
            self._logger.debug("Rejected dependencies", rejected=skipped)
        return "\n".join(lines)
