"""
Shape checks for JSON produced by xcresulttool.

Only a small subset of required keys is checked; everything else is optional
and defaulted when the models are built.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Tuple

BUILD_RESULT_KEYS = ("status", "errorCount", "warningCount")
TEST_RESULT_KEYS = ("result", "totalTestCount", "failedTests")
DETAILED_TEST_RESULT_KEYS = ("testNodes", "devices", "testPlanConfigurations")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a shape check; truthy when the value is usable."""
    valid: bool
    missing: Tuple[str, ...] = ()
    reason: str = ""

    def __bool__(self) -> bool:
        return self.valid


def _require_keys(value: Any, keys: Iterable[str]) -> ValidationResult:
    if not isinstance(value, dict):
        return ValidationResult(False, reason=f"expected a JSON object, got {type(value).__name__}")
    missing = tuple(k for k in keys if k not in value)
    if missing:
        return ValidationResult(False, missing=missing, reason=f"missing keys: {', '.join(missing)}")
    return ValidationResult(True)


def validate_build_result(value: Any) -> ValidationResult:
    return _require_keys(value, BUILD_RESULT_KEYS)


def validate_test_result(value: Any) -> ValidationResult:
    return _require_keys(value, TEST_RESULT_KEYS)


def validate_detailed_test_result(value: Any) -> ValidationResult:
    return _require_keys(value, DETAILED_TEST_RESULT_KEYS)
