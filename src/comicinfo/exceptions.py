"""Custom exceptions for ComicInfo validation and encoding."""


class ComicInfoError(Exception):
    """Base exception for all ComicInfo errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class PreconditionError(ComicInfoError):
    """Raised when an operation is called without its required inputs."""

    pass


class ValidationError(ComicInfoError):
    """Raised when a document field fails one of its rules.

    Attributes:
        field: Wire name of the failing field (e.g. "CommunityRating")
        value: The offending value
        reason: Human-readable description of the violated rule
        position: 0-based URL index or 1-based page position, when relevant
    """

    def __init__(
        self,
        field: str,
        value: object,
        reason: str,
        position: int | None = None,
    ):
        self.field = field
        self.value = value
        self.reason = reason
        self.position = position
        super().__init__(f"failed to validate {field}: {reason}")


class SerializationError(ComicInfoError):
    """Raised when the document cannot be written to the output sink."""

    pass
