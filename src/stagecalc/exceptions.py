"""Custom exceptions for stagecalc."""

from __future__ import annotations


class StagecalcError(Exception):
    """Base exception for all stagecalc errors."""

    pass


class ValidationError(StagecalcError):
    """Raised when calculator input fails validation."""

    pass


class InvalidInputError(ValidationError):
    """Raised when a numeric or date input is unusable.

    Attributes:
        fields: Names of the offending input fields, in input order
    """

    def __init__(self, fields: list[str] | tuple[str, ...], detail: str | None = None):
        self.fields = tuple(fields)
        message = "Enter valid positive numbers and a valid start date"
        if self.fields:
            message += f" (invalid: {', '.join(self.fields)})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class InsufficientInputError(ValidationError):
    """Raised when neither a total nor any per-stage units were supplied."""

    def __init__(self) -> None:
        super().__init__("Enter the total units or the units for each stage")


class ConfigError(StagecalcError):
    """Raised when a configuration file cannot be loaded."""

    pass


class NoResultsError(StagecalcError):
    """Raised when exporting a schedule that has no stage results."""

    def __init__(self) -> None:
        super().__init__("No results to show, calculate the stages first")
