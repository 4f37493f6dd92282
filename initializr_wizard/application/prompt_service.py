"""Prompt engine: screen rendering and single-field collection."""

from __future__ import annotations

from rich.markup import escape

from initializr_wizard.domain.exceptions import MetadataFormatError, ValidationError
from initializr_wizard.domain.models import QueryAccumulator, WizardSession
from initializr_wizard.domain.services import (
    FieldRegistry,
    parse_choice,
    validate_text,
)
from initializr_wizard.ports.console import ConsolePort
from initializr_wizard.ports.logger import LoggerPort

RULE = "=" * 52

# (session attribute, label) in display order
STATE_LABELS: list[tuple[str, str]] = [
    ("build_system", "Build System"),
    ("language", "Language"),
    ("framework_version", "Spring Boot"),
    ("runtime_version", "Java Version"),
    ("packaging", "Packaging"),
    ("group_id", "Group ID"),
    ("artifact_id", "Artifact ID"),
    ("name", "Name"),
    ("package_name", "Package Name"),
]


def success_message(text: str) -> str:
    """Format a transient success message."""
    return f"[green]{escape(text)}[/green]"


def error_message(text: str) -> str:
    """Format a transient error message."""
    return f"[red]{escape(text)}[/red]"


class PromptService:
    """Application service rendering the session and collecting field values."""

    def __init__(
        self,
        console: ConsolePort,
        registry: FieldRegistry,
        session: WizardSession,
        accumulator: QueryAccumulator,
        logger: LoggerPort,
    ):
        self._console = console
        self._registry = registry
        self._session = session
        self._accumulator = accumulator
        self._logger = logger

    @property
    def console(self) -> ConsolePort:
        return self._console

    @property
    def session(self) -> WizardSession:
        return self._session

    def render_state(self) -> None:
        """Redraw the screen: current configuration, then any pending message.

        The pending message is shown once and then cleared.
        """
        self._console.clear()
        self._console.print_header("CURRENT PROJECT CONFIGURATION")

        for attribute, label in STATE_LABELS:
            value = getattr(self._session, attribute)
            if value:
                self._console.print(
                    f"  [cyan]{label + ':':<14}[/cyan][green]{escape(value)}[/green]"
                )
        if self._session.dependencies:
            joined = escape(", ".join(self._session.dependencies))
            self._console.print(f"  [cyan]{'Dependencies:':<14}[/cyan][green]{joined}[/green]")

        self._console.print(RULE, style="yellow")
        self._console.print()

        message = self._session.pop_message()
        if message:
            self._console.print(message)
            self._console.print()

    def collect_choice(self, field_key: str) -> str:
        """Prompt until the user picks one of a field's values by number.

        Empty input selects the declared default.

        Returns:
            The selected value id

        Raises:
            MetadataFormatError: If the field has no selectable values
        """
        definition = self._registry.document.get_field(field_key)
        if definition is None or not definition.values:
            raise MetadataFormatError(f"Metadata has no selectable values for '{field_key}'.")

        options = definition.values
        default_index = definition.index_of(definition.default)
        label = self._registry.label(field_key)
        description = self._registry.describe(field_key)

        while True:
            self.render_state()
            self._console.print(f"--- {label} Selection ---", style="yellow")
            self._console.print(f"Description: {escape(description)}", style="cyan")
            self._console.print("Available options (Select by number):")
            for position, option in enumerate(options, start=1):
                text = escape(option.id)
                if option.name and option.name != option.id:
                    text = f"{text} ({escape(option.name)})"
                if position == default_index:
                    self._console.print(f"  {position}) {text} \\[DEFAULT]", style="cyan")
                else:
                    self._console.print(f"  {position}) {text}")

            default_hint = default_index if default_index is not None else "none"
            answer = self._console.prompt(f"Select option by number (default: {default_hint})")

            try:
                index = parse_choice(answer, len(options), default_index)
            except ValidationError as e:
                self._logger.debug("Rejected choice", field=field_key, answer=answer)
                self._session.set_message(error_message(e.message))
                continue

            selected = options[index - 1].id
            self._store(field_key, selected)
            self._session.set_message(success_message(f"{label} set to: {selected}"))
            return selected

    def collect_text(self, field_key: str, default: str | None = None) -> str:
        """Prompt until the user enters a valid identifier.

        Empty input selects the default.

        Returns:
            The stored value
        """
        if default is None:
            default = self._registry.text_default(field_key)
        label = self._registry.label(field_key)
        description = self._registry.describe(field_key)

        while True:
            self.render_state()
            self._console.print(f"--- {label} ---", style="yellow")
            self._console.print(f"Description: {escape(description)}", style="cyan")
            answer = self._console.prompt(
                f"Enter {label} [cyan](default: {escape(default)})[/cyan]"
            )
            value = answer or default

            try:
                validate_text(value)
            except ValidationError as e:
                self._logger.debug("Rejected text", field=field_key, answer=answer)
                self._session.set_message(error_message(e.message))
                continue

            self._store(field_key, value)
            self._session.set_message(success_message(f"{label} set to: {value}"))
            return value

    def _store(self, field_key: str, value: str) -> None:
        attribute = self._registry.session_attribute(field_key)
        if attribute:
            setattr(self._session, attribute, value)
        self._accumulator.append(field_key, value)
        self._logger.debug("Field collected", field=field_key, value=value)
