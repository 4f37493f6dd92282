"""Domain-specific exceptions for the initializr wizard."""


class WizardError(Exception):
    """Base exception for all wizard errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MetadataError(WizardError):
    """Errors raised while obtaining the metadata document. Always fatal."""

    pass


class NetworkError(MetadataError):
    """The metadata request could not complete."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url
        if url:
            self.details["url"] = url


class EmptyResponseError(MetadataError):
    """The metadata request succeeded but returned no bytes."""

    pass


class MetadataFormatError(MetadataError):
    """The metadata document does not have the expected shape."""

    pass


class DownloadError(WizardError):
    """The project archive could not be downloaded."""

    def __init__(self, url: str, reason: str | None = None):
        message = f"Failed to fetch starter project from {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, details={"url": url})
        self.url = url
        self.reason = reason


class InputError(WizardError):
    """Recoverable user input errors. The wizard re-prompts on these."""

    pass


class ValidationError(InputError):
    """User input fails a field's format or range rule."""

    pass


class DuplicateSelectionError(InputError):
    """Dependency id is already selected."""

    reason = "duplicate"

    def __init__(self, dependency_id: str):
        super().__init__(
            f"Dependency '{dependency_id}' is already selected",
            details={"dependency_id": dependency_id},
        )
        self.dependency_id = dependency_id


class InvalidIdError(InputError):
    """Dependency id does not exist in the metadata document."""

    reason = "invalid"

    def __init__(self, dependency_id: str):
        super().__init__(
            f"Dependency '{dependency_id}' does not exist",
            details={"dependency_id": dependency_id},
        )
        self.dependency_id = dependency_id


class ConfirmationParseError(InputError):
    """Answer to a yes/no question was not recognized."""

    pass
