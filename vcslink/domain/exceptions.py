"""Domain exceptions for vcslink.

These exceptions represent misuse of the host variants and domain-level
errors. They should be caught at the application boundary (CLI) and
converted to appropriate user-facing error messages.
"""


class VcslinkDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class NotApplicableError(VcslinkDomainError):
    """Raised when a URL does not belong to the dialect of the invoked host."""

    pass
