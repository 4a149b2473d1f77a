"""Human-readable rendering of validation failures."""

from typing import Dict, List

from tagcheck.enums import FailureReason

_DESCRIPTIONS = {
    FailureReason.FAIL_LEN_MIN: "Value is shorter than the minimum length",
    FailureReason.FAIL_LEN_MAX: "Value is longer than the maximum length",
    FailureReason.FAIL_VAL_MIN: "Value is below the minimum",
    FailureReason.FAIL_VAL_MAX: "Value is above the maximum",
    FailureReason.FAIL_EMPTY: "Value is required but empty",
    FailureReason.FAIL_REGEXP: "Value does not match the required pattern",
    FailureReason.FAIL_EMAIL: "Value is not a valid email address",
    FailureReason.FAIL_ZERO: "Value is required but zero",
    FailureReason.FAIL_TYPE: "Value does not match the declared field kind",
}


def describe_failure(reason: FailureReason) -> str:
    """One-line description of a failure reason."""
    return _DESCRIPTIONS[FailureReason(reason)]


def format_failures(failures: Dict[str, FailureReason]) -> List[str]:
    """Render a failures map as ``field: description (REASON_NAME)`` lines."""
    return [f"{name}: {describe_failure(reason)} ({FailureReason(reason).name})"
            for name, reason in failures.items()]
