"""Shared test fixtures for rulecheck tests."""

from collections.abc import Callable

import pytest

from rulecheck import Validation, ValidationError, ValidationResult, rule


class CountingPredicate:
    """Predicate wrapper that records how often it was called."""

    def __init__(self, predicate: Callable[[object], bool]) -> None:
        self.predicate = predicate
        self.calls = 0

    def __call__(self, value: object) -> bool:
        self.calls += 1
        return self.predicate(value)


def make_result(*messages: str) -> ValidationResult:
    """Build a result holding one error per message, in order.

    Goes through the public factories only, so it exercises `concat`.
    """
    result = ValidationResult.valid()
    for message in messages:
        result = result.concat(ValidationResult.invalid(ValidationError(message)))
    return result


def messages_of(result: ValidationResult) -> list[str]:
    """Return the error messages of a result, in order."""
    return [error.message for error in result.validation_errors]


@pytest.fixture
def is_positive() -> Validation[int]:
    """Rule failing for zero and negative numbers."""
    return rule(lambda x: x > 0, "must be positive")


@pytest.fixture
def is_even() -> Validation[int]:
    """Rule failing for odd numbers."""
    return rule(lambda x: x % 2 == 0, "must be even")
