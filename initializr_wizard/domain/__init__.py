"""Domain layer: metadata, session state, validation rules and query building."""

from initializr_wizard.domain.exceptions import (
    ConfirmationParseError,
    DownloadError,
    DuplicateSelectionError,
    EmptyResponseError,
    InputError,
    InvalidIdError,
    MetadataError,
    MetadataFormatError,
    NetworkError,
    ValidationError,
    WizardError,
)
from initializr_wizard.domain.models import (
    DependencyCategory,
    DependencyEntry,
    DependencySelectionResult,
    FieldDefinition,
    FieldKey,
    MetadataDocument,
    QueryAccumulator,
    RejectedDependency,
    ValueOption,
    WizardOutcome,
    WizardResult,
    WizardSession,
)

__all__ = [
    "ConfirmationParseError",
    "DependencyCategory",
    "DependencyEntry",
    "DependencySelectionResult",
    "DownloadError",
    "DuplicateSelectionError",
    "EmptyResponseError",
    "FieldDefinition",
    "FieldKey",
    "InputError",
    "InvalidIdError",
    "MetadataDocument",
    "MetadataError",
    "MetadataFormatError",
    "NetworkError",
    "QueryAccumulator",
    "RejectedDependency",
    "ValidationError",
    "ValueOption",
    "WizardError",
    "WizardOutcome",
    "WizardResult",
    "WizardSession",
]
