"""Error formatting and conversion utilities for rulecheck.

Provides a ready-made exception for failed results, clean message
formatting, and a bridge from Pydantic ValidationError into results that
can be concatenated with rule output.
"""

import pydantic

from rulecheck.validation import ValidationError, ValidationResult


class RuleViolationError(Exception):
    """Raised when a validated value broke one or more rules.

    Usable directly as a factory: `result.raise_for_errors(RuleViolationError)`.
    """

    def __init__(self, errors: list[ValidationError] | None = None) -> None:
        """Initialize with the accumulated validation errors."""
        self.errors = list(errors or [])
        message = "Validation failed"
        if self.errors:
            error_details = "\n  - ".join(error.message for error in self.errors)
            message += f":\n  - {error_details}"
        super().__init__(message)


def format_validation_errors(errors: list[ValidationError]) -> str:
    """Format validation errors into a single user-friendly message.

    Args:
        errors: Errors taken from a ValidationResult.

    Returns:
        The lone message for one error, messages joined by "; " otherwise.
    """
    messages = [error.message for error in errors]

    if len(messages) == 1:
        return messages[0]

    return "; ".join(messages)


def _format_pydantic_error(err: dict) -> str:
    # Field path, e.g. "ports.0.name" or just "description"
    loc = ".".join(str(part) for part in err["loc"])
    error_type = err["type"]

    if error_type == "missing":
        text = "field is required"
    elif error_type == "string_type":
        text = "expected string"
    elif error_type == "list_type":
        text = "expected list"
    elif error_type == "int_type":
        text = "expected integer"
    elif error_type == "bool_type":
        text = "expected boolean"
    else:
        text = err["msg"].lower()

    if not loc:
        return text
    return f"'{loc}': {text}"


def from_pydantic(error: pydantic.ValidationError) -> ValidationResult:
    """Convert a Pydantic ValidationError into a ValidationResult.

    Each Pydantic error becomes one ValidationError, in Pydantic's order,
    with URLs and type jargon stripped.

    Args:
        error: The Pydantic ValidationError to convert.

    Returns:
        An invalid result, or the valid result if Pydantic reported nothing.
    """
    result = ValidationResult.valid()
    for err in error.errors():
        result = result.concat(
            ValidationResult.invalid(ValidationError(_format_pydantic_error(err)))
        )
    return result
