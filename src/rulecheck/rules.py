"""Composable validation rules.

A rule is a stateless callable from a value to a ValidationResult. Rules are
built from a predicate and a message, then combined with `and_` (or `&`) so
that every failed constraint is reported, not just the first one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from rulecheck.validation import ValidationError, ValidationResult

T = TypeVar("T")

RuleLike = Callable[[T], ValidationResult]


class Validation(Generic[T]):
    """A reusable check over values of type T."""

    __slots__ = ("_check",)

    def __init__(self, check: Callable[[T], ValidationResult]) -> None:
        if not callable(check):
            msg = f"Rule must be callable, got {type(check).__name__}"
            raise TypeError(msg)
        self._check = check

    @staticmethod
    def rule(predicate: Callable[[T], object], message: str) -> Validation[T]:
        """Build a rule from a predicate and the message reported on failure.

        Args:
            predicate: Pure function of the value. A truthy return means the
                value satisfies the constraint.
            message: Message of the single error produced when it doesn't.

        Returns:
            A rule yielding `ValidationResult.valid()` or a one-error result.
        """

        def check(value: T) -> ValidationResult:
            if predicate(value):
                return ValidationResult.valid()
            return ValidationResult.invalid(ValidationError(message))

        return Validation(check)

    def validate(self, value: T) -> ValidationResult:
        """Run the rule against `value`."""
        return self._check(value)

    def __call__(self, value: T) -> ValidationResult:
        return self._check(value)

    def and_(self, other: RuleLike[T]) -> Validation[T]:
        """Combine with another rule, accumulating errors from both.

        Both rules run on non-None values and their errors are concatenated,
        this rule's first. On None only this rule runs; `other` is skipped so
        that rules which cannot handle None never see it.

        Args:
            other: A Validation or any callable returning a ValidationResult.

        Returns:
            The composite rule.
        """
        second = _as_validation(other)

        def check(value: T) -> ValidationResult:
            result = self.validate(value)
            if value is None:
                return result
            return result.concat(second.validate(value))

        return Validation(check)

    def __and__(self, other: RuleLike[T]) -> Validation[T]:
        return self.and_(other)

    def __rand__(self, other: RuleLike[T]) -> Validation[T]:
        return _as_validation(other).and_(self)


def rule(predicate: Callable[[T], object], message: str) -> Validation[T]:
    """Module-level shortcut for `Validation.rule`."""
    return Validation.rule(predicate, message)


def all_of(*rules: RuleLike[T]) -> Validation[T]:
    """Combine rules left to right with `and_`.

    Raises:
        TypeError: If no rule is given.
    """
    if not rules:
        msg = "all_of() requires at least one rule"
        raise TypeError(msg)
    combined = _as_validation(rules[0])
    for other in rules[1:]:
        combined = combined.and_(other)
    return combined


def _as_validation(candidate: RuleLike[T]) -> Validation[T]:
    if isinstance(candidate, Validation):
        return candidate
    return Validation(candidate)
