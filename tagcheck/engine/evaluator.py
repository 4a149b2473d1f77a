"""Apply a resolved Constraint to one field value."""

import re
from typing import Any, Optional

from tagcheck.enums import FailureReason, FieldKind
from tagcheck.engine.parser import parse_int
from tagcheck.models.constraint import Constraint

EMAIL_PATTERN = (
    r"^[a-zA-Z0-9.!#$%&'*+\/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*\Z"
)


def convert_value(value: Any, kind: FieldKind) -> Any:
    """Convert a value to the declared kind, raising when it cannot be."""
    if isinstance(value, bool):
        raise TypeError(f"Cannot read boolean {value!r} as {kind.value}")

    if kind == FieldKind.STRING:
        if isinstance(value, str):
            return value
        # Unquoted YAML scalars such as post codes arrive as numbers
        if isinstance(value, (int, float)):
            return str(value)
        raise TypeError(f"Cannot read {type(value).__name__} as string")

    if kind == FieldKind.INT:
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"Cannot read {value!r} as int without losing precision")
            return int(value)
        if isinstance(value, str):
            converted = parse_int(value)
            if converted is None:
                raise ValueError(f"Cannot read {value!r} as int")
            return converted
        raise TypeError(f"Cannot read {type(value).__name__} as int")

    return value


def _check_required(value: Any, kind: FieldKind, constraint: Constraint) -> Optional[FailureReason]:
    if kind == FieldKind.STRING and value == "":
        return FailureReason.FAIL_EMPTY
    if kind == FieldKind.INT and value == 0 and not constraint.zero_allowed:
        return FailureReason.FAIL_ZERO
    return None


def _check_string(value: str, constraint: Constraint) -> Optional[FailureReason]:
    if constraint.len_min > 0 and len(value) < constraint.len_min:
        return FailureReason.FAIL_LEN_MIN
    if constraint.len_max > 0 and len(value) > constraint.len_max:
        return FailureReason.FAIL_LEN_MAX

    # Unanchored: the pattern carries its own ^/$ when it wants them
    if constraint.pattern is not None and constraint.pattern.search(value) is None:
        return FailureReason.FAIL_REGEXP

    if constraint.email:
        email_re = re.compile(EMAIL_PATTERN)
        if email_re.match(value) is None:
            return FailureReason.FAIL_EMAIL
    return None


def _check_int(value: int, constraint: Constraint) -> Optional[FailureReason]:
    # Each bound is live when non-zero or explicitly declared as 0
    min_active = constraint.val_min != 0 or constraint.min_explicit_zero
    if min_active and value < constraint.val_min:
        return FailureReason.FAIL_VAL_MIN

    max_active = constraint.val_max != 0 or constraint.max_explicit_zero
    if max_active and value > constraint.val_max:
        return FailureReason.FAIL_VAL_MAX
    return None


def evaluate(value: Any, constraint: Constraint, kind: Optional[FieldKind] = None) -> Optional[FailureReason]:
    """
    Check a value against a constraint.

    Returns None on success, otherwise the first rule violated, in this order:
    required, length min/max, custom pattern, email, value min/max. Values of
    any other kind always pass.

    When ``kind`` is given the value is first converted to it; a value that
    cannot be converted fails with FAIL_TYPE.
    """
    if kind is None:
        kind = FieldKind.of_value(value)
    if kind == FieldKind.OTHER:
        return None

    try:
        value = convert_value(value, kind)
    except (TypeError, ValueError):
        return FailureReason.FAIL_TYPE

    if constraint.required:
        reason = _check_required(value, kind, constraint)
        if reason is not None:
            return reason

    if kind == FieldKind.STRING:
        return _check_string(value, constraint)
    return _check_int(value, constraint)
