"""Validation result types for rulecheck.

Provides immutable dataclasses for a single validation error and for the
accumulated outcome of running one or more rules against a value.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single failed constraint.

    Attributes:
        message: Human-readable description of what failed. Stored as given.
    """

    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Result of a validation operation.

    A result is valid when it carries no errors. Results never change after
    construction; `concat` always returns a result without touching either
    operand.

    Attributes:
        errors: Ordered errors accumulated so far.
    """

    errors: tuple[ValidationError, ...] = ()

    def __post_init__(self) -> None:
        # Detach from any caller-owned sequence
        object.__setattr__(self, "errors", tuple(self.errors))

    @classmethod
    def valid(cls) -> ValidationResult:
        """Return the shared result with no errors."""
        return _VALID

    @classmethod
    def invalid(cls, error: ValidationError) -> ValidationResult:
        """Return a result wrapping exactly one error."""
        return cls((error,))

    @property
    def is_valid(self) -> bool:
        """Return True if no error was recorded."""
        return len(self.errors) == 0

    @property
    def validation_errors(self) -> list[ValidationError]:
        """Return a copy of the recorded errors, in evaluation order."""
        return list(self.errors)

    def __bool__(self) -> bool:
        """Return True if valid. Truthiness is validity, not non-emptiness."""
        return self.is_valid

    def concat(self, other: ValidationResult) -> ValidationResult:
        """Merge two results, keeping this result's errors first.

        Args:
            other: The result to append.

        Returns:
            `other` itself when this result is valid, otherwise a new result
            with this result's errors followed by `other`'s errors.
        """
        if self.is_valid:
            return other
        return ValidationResult(self.errors + other.errors)

    def if_any_error_occurred(
        self, handler: Callable[[list[ValidationError]], object]
    ) -> None:
        """Call `handler` with the errors, only when invalid."""
        if not self.is_valid:
            handler(self.validation_errors)

    def if_valid_or_else(
        self,
        on_valid: Callable[[], object],
        on_invalid: Callable[[list[ValidationError]], object],
    ) -> None:
        """Call exactly one of `on_valid()` or `on_invalid(errors)`."""
        if self.is_valid:
            on_valid()
        else:
            on_invalid(self.validation_errors)

    def raise_if_any_error_occurred(
        self, failure: BaseException | Callable[[], BaseException]
    ) -> None:
        """Raise a caller-chosen failure when invalid.

        Args:
            failure: An exception instance, or a zero-argument callable
                returning one. The callable is only invoked when invalid.

        Raises:
            BaseException: The given failure, if any error occurred.
        """
        if self.is_valid:
            return
        if isinstance(failure, BaseException):
            raise failure
        raise failure()

    def raise_for_errors(
        self, factory: Callable[[list[ValidationError]], BaseException]
    ) -> None:
        """Raise `factory(errors)` when invalid.

        Args:
            factory: Builds the exception from the accumulated errors, e.g.
                `RuleViolationError`.

        Raises:
            BaseException: Whatever `factory` returns, if any error occurred.
        """
        if not self.is_valid:
            raise factory(self.validation_errors)

    def if_valid_or_else_raise(
        self,
        on_valid: Callable[[], object],
        factory: Callable[[list[ValidationError]], BaseException],
    ) -> None:
        """Run `on_valid()` when valid, otherwise raise `factory(errors)`."""
        if not self.is_valid:
            raise factory(self.validation_errors)
        on_valid()


_VALID = ValidationResult()
