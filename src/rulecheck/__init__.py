"""rulecheck - composable validation rules that accumulate their failures."""

from importlib.metadata import PackageNotFoundError, version

from rulecheck.errors import RuleViolationError, format_validation_errors, from_pydantic
from rulecheck.rules import Validation, all_of, rule
from rulecheck.validation import ValidationError, ValidationResult

try:
    __version__ = version("rulecheck")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "RuleViolationError",
    "Validation",
    "ValidationError",
    "ValidationResult",
    "__version__",
    "all_of",
    "format_validation_errors",
    "from_pydantic",
    "rule",
]
