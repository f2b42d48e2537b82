class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ParseError(DomainError):
    """Raised when a timesheet is structurally unusable for its layout."""


class HeaderNotFoundError(ParseError):
    """Raised when the header row of a layout cannot be located."""


class MissingColumnError(ParseError):
    """Raised when a required column is absent from the header row."""

    def __init__(self, column: str):
        super().__init__(f"{column} column not found")
        self.column = column


class UnknownFormatError(DomainError):
    """Raised when no known layout matches the uploaded grid."""
