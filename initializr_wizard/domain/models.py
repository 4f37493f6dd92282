"""Domain models for the initializr wizard following DDD principles."""

from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from initializr_wizard.domain.exceptions import MetadataFormatError


class FieldKey(str, Enum):
    """Value object naming every query parameter the wizard can produce."""

    BUILD_SYSTEM = "type"
    LANGUAGE = "language"
    FRAMEWORK_VERSION = "bootVersion"
    RUNTIME_VERSION = "javaVersion"
    PACKAGING = "packaging"
    GROUP_ID = "groupId"
    ARTIFACT_ID = "artifactId"
    NAME = "name"
    PACKAGE_NAME = "packageName"
    DESCRIPTION = "description"
    DEPENDENCIES = "dependencies"


class WizardOutcome(str, Enum):
    """Value object describing how a wizard run ended."""

    DOWNLOADED = "downloaded"
    CANCELLED = "cancelled"


# Metadata keys the wizard reads; other top-level keys are ignored.
METADATA_FIELDS: tuple[str, ...] = (
    FieldKey.BUILD_SYSTEM.value,
    FieldKey.LANGUAGE.value,
    FieldKey.FRAMEWORK_VERSION.value,
    FieldKey.RUNTIME_VERSION.value,
    FieldKey.PACKAGING.value,
    FieldKey.GROUP_ID.value,
    FieldKey.ARTIFACT_ID.value,
)


class ValueOption(BaseModel):
    """A single selectable value of a metadata field."""

    id: str = Field(..., min_length=1, description="Identifier sent to the generator")
    name: str | None = Field(None, description="Human-readable name")
    description: str | None = Field(None, description="Optional free-text description")

    model_config = ConfigDict(frozen=True)


class FieldDefinition(BaseModel):
    """Value-set of a metadata field: declared default plus selectable values."""

    type: str | None = Field(None, description="Field kind, e.g. single-select or text")
    default: str | None = Field(None, description="Declared default id or text")
    description: str | None = Field(None, description="Field description, if published")
    values: list[ValueOption] = Field(default_factory=list, description="Selectable values")

    @field_validator("default", mode="before")
    @classmethod
    def coerce_default(cls, v: Any) -> str | None:
        """Accept non-string defaults published by the server."""
        if v is None:
            return None
        return str(v)

    def index_of(self, value_id: str | None) -> int | None:
        """Return the 1-based position of a value id, if present."""
        for position, option in enumerate(self.values, start=1):
            if option.id == value_id:
                return position
        return None

    model_config = ConfigDict(frozen=True)


class DependencyEntry(BaseModel):
    """A dependency that can be added to the generated project."""

    id: str = Field(..., min_length=1, description="Dependency identifier")
    name: str | None = Field(None, description="Human-readable name")
    description: str | None = Field(None, description="Dependency description")

    @property
    def label(self) -> str:
        """Display name, falling back to the id."""
        return self.name or self.id

    model_config = ConfigDict(frozen=True)


class DependencyCategory(BaseModel):
    """A named group of dependencies shown as a first-level menu."""

    name: str = Field(..., description="Category name")
    values: list[DependencyEntry] = Field(default_factory=list, description="Dependencies")

    model_config = ConfigDict(frozen=True)


class DependencyTree(BaseModel):
    """Hierarchical dependency listing of the metadata document."""

    type: str | None = Field(None, description="Field kind, usually hierarchical-multi-select")
    values: list[DependencyCategory] = Field(default_factory=list, description="Categories")

    model_config = ConfigDict(frozen=True)


class MetadataDocument(BaseModel):
    """Aggregate root holding the metadata fetched from the generator service.

    Immutable after construction; every id the wizard later accepts must be
    found in this document.
    """

    field_definitions: dict[str, FieldDefinition] = Field(
        default_factory=dict, description="Field definitions keyed by field key"
    )
    dependencies: DependencyTree = Field(
        default_factory=DependencyTree, description="Dependency categories"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_payload(cls, payload: Any) -> MetadataDocument:
        """Build a document from the decoded JSON payload.

        Raises:
            MetadataFormatError: If the payload is not a JSON object or one of
                the wizard's fields cannot be parsed
        """
        if not isinstance(payload, dict):
            raise MetadataFormatError("Metadata document must be a JSON object")

        fields: dict[str, FieldDefinition] = {}
        try:
            for key in METADATA_FIELDS:
                value = payload.get(key)
                if not isinstance(value, dict):
                    continue
                fields[key] = FieldDefinition.model_validate(value)
            dependencies = DependencyTree.model_validate(
                payload.get(FieldKey.DEPENDENCIES.value) or {}
            )
        except ValueError as e:
            raise MetadataFormatError(f"Unexpected metadata format: {e}") from e

        return cls(field_definitions=fields, dependencies=dependencies)

    def get_field(self, key: str) -> FieldDefinition | None:
        """Get the definition of a field, if published."""
        return self.field_definitions.get(key)

    @property
    def categories(self) -> list[DependencyCategory]:
        """Dependency categories in document order."""
        return self.dependencies.values

    def find_dependency(self, dependency_id: str) -> DependencyEntry | None:
        """Search every category for a dependency id."""
        for category in self.categories:
            for entry in category.values:
                if entry.id == dependency_id:
                    return entry
        return None

    def has_dependency(self, dependency_id: str) -> bool:
        """Check whether a dependency id exists in any category."""
        return self.find_dependency(dependency_id) is not None


class WizardSession(BaseModel):
    """Entity holding everything collected during one wizard run."""

    build_system: str | None = Field(None, description="Selected build system id")
    language: str | None = Field(None, description="Selected language id")
    framework_version: str | None = Field(None, description="Selected framework version id")
    runtime_version: str | None = Field(None, description="Selected runtime version id")
    packaging: str | None = Field(None, description="Selected packaging id")
    group_id: str | None = Field(None, description="Group identifier")
    artifact_id: str | None = Field(None, description="Artifact identifier")
    name: str | None = Field(None, description="Derived project name")
    package_name: str | None = Field(None, description="Derived base package name")
    description: str | None = Field(None, description="Fixed project description")
    dependencies: list[str] = Field(default_factory=list, description="Selected dependency ids")
    pending_message: str | None = Field(None, description="Transient status message")
    derived: bool = Field(default=False, description="Derived fields already computed")

    model_config = ConfigDict(validate_assignment=True)

    def set_message(self, message: str) -> None:
        """Replace the pending transient message."""
        self.pending_message = message

    def pop_message(self) -> str | None:
        """Take the pending transient message, clearing the slot."""
        message = self.pending_message
        self.pending_message = None
        return message

    def has_dependency(self, dependency_id: str) -> bool:
        """Check whether a dependency is already selected."""
        return dependency_id in self.dependencies

    def add_dependency(self, dependency_id: str) -> None:
        """Append a dependency id unless it is already selected."""
        if dependency_id not in self.dependencies:
            self.dependencies = [*self.dependencies, dependency_id]

    def derive_fields(self) -> dict[str, str]:
        """Compute name and package name from the collected identifiers.

        Runs at most once per session; later calls return an empty mapping.

        Returns:
            The derived values keyed by query key, in query order
        """
        if self.derived:
            return {}
        self.derived = True

        derived: dict[str, str] = {}
        if self.artifact_id:
            self.name = self.artifact_id
            derived[FieldKey.NAME.value] = self.name
        if self.group_id and self.artifact_id:
            self.package_name = f"{self.group_id}.{self.artifact_id}"
            derived[FieldKey.PACKAGE_NAME.value] = self.package_name
        return derived


class QueryAccumulator(BaseModel):
    """Append-only ordered list of query parameters with encoded values."""

    params: list[tuple[str, str]] = Field(
        default_factory=list, description="(key, percent-encoded value) pairs"
    )

    def append(self, key: str, value: str) -> None:
        """Encode a value as a URI component and append it."""
        self.params.append((key, quote(value, safe="")))


class RejectedDependency(BaseModel):
    """Value object for a dependency token that was not accepted."""

    dependency_id: str = Field(..., description="Rejected token after index resolution")
    reason: str = Field(..., description="Rejection reason: duplicate or invalid")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.dependency_id} ({self.reason})"


class DependencySelectionResult(BaseModel):
    """Outcome of processing one line of dependency input."""

    accepted: list[str] = Field(default_factory=list, description="Newly added ids")
    rejected: list[RejectedDependency] = Field(
        default_factory=list, description="Rejected tokens with reasons"
    )

    @property
    def is_empty(self) -> bool:
        """True when the line contained no candidate tokens."""
        return not self.accepted and not self.rejected


class WizardResult(BaseModel):
    """Value object summarizing a finished wizard run."""

    outcome: WizardOutcome = Field(..., description="How the run ended")
    archive_path: str | None = Field(None, description="Downloaded archive, if any")
    download_url: str | None = Field(None, description="Archive URL that was requested")

    model_config = ConfigDict(frozen=True)
