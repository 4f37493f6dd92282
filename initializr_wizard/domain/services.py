"""Domain services for the initializr wizard following DDD principles."""

from __future__ import annotations

import re

from initializr_wizard.domain.exceptions import (
    ConfirmationParseError,
    DuplicateSelectionError,
    InvalidIdError,
    ValidationError,
)
from initializr_wizard.domain.models import (
    DependencySelectionResult,
    FieldKey,
    MetadataDocument,
    QueryAccumulator,
    RejectedDependency,
    WizardSession,
)

TEXT_PATTERN = re.compile(r"[a-zA-Z0-9._-]+")

FALLBACK_DESCRIPTIONS: dict[str, str] = {
    FieldKey.BUILD_SYSTEM.value: "Choose your build system.",
    FieldKey.PACKAGING.value: "Select the format for the final executable (Jar or War).",
    FieldKey.RUNTIME_VERSION.value: "The Java version to use for the project.",
    FieldKey.FRAMEWORK_VERSION.value: "The version of Spring Boot to use.",
    FieldKey.LANGUAGE.value: "The programming language for the project (Java, Kotlin, or Groovy).",
}

UNKNOWN_DESCRIPTION = "No official description available."


def humanize(field_key: str) -> str:
    """Convert a camel-case key into a spaced, capitalized label.

    Example:
        >>> humanize("bootVersion")
        'Boot Version'
    """
    spaced = re.sub(r"([A-Z])", r" \1", field_key).strip()
    if not spaced:
        return spaced
    return spaced[0].upper() + spaced[1:]


class DescriptionResolver:
    """Domain service resolving the help text shown above each prompt."""

    def __init__(self, document: MetadataDocument):
        self._document = document

    def describe(self, field_key: str) -> str:
        """Get the description of a field.

        Prefers the text published in the metadata document; falls back to
        built-in descriptions for the known choice fields.
        """
        definition = self._document.get_field(field_key)
        description = definition.description if definition else None

        if not description or description == "null":
            return FALLBACK_DESCRIPTIONS.get(field_key, UNKNOWN_DESCRIPTION)
        return description


class FieldRegistry:
    """Declarative description of the fields the wizard collects, in order."""

    CHOICE_FIELDS: dict[str, str] = {
        FieldKey.BUILD_SYSTEM.value: "build_system",
        FieldKey.LANGUAGE.value: "language",
        FieldKey.FRAMEWORK_VERSION.value: "framework_version",
        FieldKey.RUNTIME_VERSION.value: "runtime_version",
        FieldKey.PACKAGING.value: "packaging",
    }

    TEXT_FIELDS: dict[str, str] = {
        FieldKey.GROUP_ID.value: "group_id",
        FieldKey.ARTIFACT_ID.value: "artifact_id",
    }

    def __init__(
        self,
        document: MetadataDocument,
        default_group_id: str = "com.example",
        default_artifact_id: str = "demo",
    ):
        self._document = document
        self._resolver = DescriptionResolver(document)
        self._text_defaults = {
            FieldKey.GROUP_ID.value: default_group_id,
            FieldKey.ARTIFACT_ID.value: default_artifact_id,
        }

    @property
    def document(self) -> MetadataDocument:
        return self._document

    def choice_fields(self) -> list[str]:
        """Choice field keys in collection order."""
        return list(self.CHOICE_FIELDS)

    def text_fields(self) -> list[str]:
        """Text field keys in collection order."""
        return list(self.TEXT_FIELDS)

    def session_attribute(self, field_key: str) -> str | None:
        """Name of the session attribute a field is stored in, if any."""
        return self.CHOICE_FIELDS.get(field_key) or self.TEXT_FIELDS.get(field_key)

    def text_default(self, field_key: str) -> str:
        """Default for a text field: published default first, then configured one."""
        definition = self._document.get_field(field_key)
        if definition and definition.default:
            return definition.default
        return self._text_defaults.get(field_key, "")

    def describe(self, field_key: str) -> str:
        return self._resolver.describe(field_key)

    def label(self, field_key: str) -> str:
        return humanize(field_key)


def validate_text(value: str) -> str:
    """Validate a free-text identifier.

    Raises:
        ValidationError: If the value is empty or contains characters other
            than letters, digits, dots, dashes or underscores
    """
    if not TEXT_PATTERN.fullmatch(value):
        raise ValidationError(
            "Invalid input. Please use letters, numbers, dots, dashes, or underscores only.",
            details={"value": value},
        )
    return value


def parse_index(token: str, count: int) -> int | None:
    """Parse a 1-based menu index; None when the token is not one."""
    if not token.isascii() or not token.isdigit():
        return None
    index = int(token)
    if 1 <= index <= count:
        return index
    return None


def parse_choice(token: str, count: int, default_index: int | None) -> int:
    """Resolve a choice prompt answer to a 1-based index.

    Empty input selects the default index.

    Raises:
        ValidationError: If the answer is not an integer in [1, count]
    """
    selection = token if token else (str(default_index) if default_index else "")
    index = parse_index(selection, count)
    if index is None:
        raise ValidationError(
            f"Invalid selection. Please enter a number between 1 and {count}.",
            details={"value": token, "count": count},
        )
    return index


def parse_confirmation(answer: str) -> bool:
    """Interpret a yes/no answer; empty input means yes.

    Raises:
        ConfirmationParseError: If the answer is not y, Y, n or N
    """
    if answer in ("", "y", "Y"):
        return True
    if answer in ("n", "N"):
        return False
    raise ConfirmationParseError("Please answer 'y' or 'n'.", details={"value": answer})


class DependencyCatalog:
    """Domain service validating dependency tokens against the metadata."""

    def __init__(self, document: MetadataDocument):
        self._document = document

    def check(self, dependency_id: str, selected: list[str]) -> str:
        """Validate a single candidate dependency id.

        Raises:
            InvalidIdError: If the id is not found in any category
            DuplicateSelectionError: If the id is already selected
        """
        if not self._document.has_dependency(dependency_id):
            raise InvalidIdError(dependency_id)
        if dependency_id in selected:
            raise DuplicateSelectionError(dependency_id)
        return dependency_id

    def resolve_tokens(self, user_input: str, category_ids: list[str]) -> list[str]:
        """Turn one line of input into candidate dependency ids.

        A line holding a single in-range index selects that entry. Anything
        else is split on commas; each token is stripped, empty tokens are
        skipped, and tokens that are valid indices are resolved too.
        """
        count = len(category_ids)
        index = parse_index(user_input, count)
        if index is not None:
            return [category_ids[index - 1]]

        candidates: list[str] = []
        for raw in user_input.split(","):
            token = raw.strip()
            if not token:
                continue
            index = parse_index(token, count)
            candidates.append(category_ids[index - 1] if index is not None else token)
        return candidates

    def select(
        self, user_input: str, category_ids: list[str], session: WizardSession
    ) -> DependencySelectionResult:
        """Process a line of dependency input, adding accepted ids to the session."""
        result = DependencySelectionResult()
        for candidate in self.resolve_tokens(user_input, category_ids):
            try:
                self.check(candidate, session.dependencies)
            except (DuplicateSelectionError, InvalidIdError) as e:
                result.rejected.append(
                    RejectedDependency(dependency_id=e.dependency_id, reason=e.reason)
                )
                continue
            session.add_dependency(candidate)
            result.accepted.append(candidate)
        return result


def build_query(accumulator: QueryAccumulator) -> str:
    """Assemble the query string in collection order."""
    query = "".join(f"{key}={value}&" for key, value in accumulator.params)
    return query.removesuffix("&")


def build_download_url(base_url: str, query: str) -> str:
    """Join the archive endpoint and a query string."""
    base = base_url.rstrip("?")
    if not query:
        return base
    return f"{base}?{query}"
