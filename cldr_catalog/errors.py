"""Exception hierarchy for CLDR loading, normalization and resolution."""

from __future__ import annotations


class CldrError(Exception):
    """Base class for every error raised by cldr_catalog."""


class NotFoundError(CldrError):
    """Raised when a locale or a data document is absent."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnknownTerritoryError(NotFoundError):
    """Raised when a territory code has no territory information."""

    def __init__(self, territory: object) -> None:
        super().__init__(f"The territory {territory!r} is unknown")
        self.territory = territory


class DecodeError(CldrError):
    """Raised when a document cannot be decoded into a tree."""


class ValidationError(CldrError):
    """Raised when a document does not have the expected shape.

    For locale documents this is most commonly a required top-level module
    that is missing; ``locale`` and ``module`` are set in that case.
    """

    def __init__(
        self,
        message: str,
        *,
        locale: str | None = None,
        module: str | None = None,
    ) -> None:
        super().__init__(message)
        self.locale = locale
        self.module = module


class UnknownNumberSystemError(CldrError):
    """Raised when a number system reference cannot be resolved."""

    def __init__(self, reference: object) -> None:
        super().__init__(f"The number system {reference!r} is unknown")
        self.reference = reference


class UnknownNumberSystemTypeError(CldrError):
    """Raised when a number system type is not known."""

    def __init__(self, reference: object) -> None:
        super().__init__(f"The number system type {reference!r} is unknown")
        self.reference = reference


class ConfigurationError(CldrError):
    """Raised for invalid configuration such as a malformed locale pattern."""
