"""Enumerations for field kinds, constraint flags and failure reasons."""

from enum import Enum
from typing import Any, get_origin


class FieldKind(str, Enum):
    """Field kinds the engine knows about."""
    STRING = "string"
    INT = "int"  # any width, signed or unsigned
    OTHER = "other"  # never validated

    @classmethod
    def of_type(cls, tp: Any) -> "FieldKind":
        """Map a Python type to a field kind."""
        # Generic aliases like list[int] are not plain classes
        if not isinstance(tp, type) or get_origin(tp) is not None:
            return cls.OTHER
        # bool is an int subclass but not an integer field
        if issubclass(tp, bool):
            return cls.OTHER
        if issubclass(tp, str):
            return cls.STRING
        if issubclass(tp, int):
            return cls.INT
        return cls.OTHER

    @classmethod
    def of_value(cls, value: Any) -> "FieldKind":
        """Map a runtime value to a field kind."""
        return cls.of_type(type(value))

    def zero_value(self) -> Any:
        """Value a field of this kind holds when nothing was assigned."""
        if self == FieldKind.STRING:
            return ""
        if self == FieldKind.INT:
            return 0
        return None


class ConstraintFlag(int, Enum):
    """Flags set while parsing a constraint string."""
    VAL_MIN_EXPLICIT_ZERO = 2
    VAL_MAX_EXPLICIT_ZERO = 4
    REQUIRED = 8
    EMAIL = 16


class FailureReason(int, Enum):
    """Reason a single field failed validation.

    Values are bit-distinct so they can be compared against codes produced by
    other implementations of the same tag language.
    """
    FAIL_LEN_MIN = 2
    FAIL_LEN_MAX = 4
    FAIL_VAL_MIN = 8
    FAIL_VAL_MAX = 16
    FAIL_EMPTY = 32
    FAIL_REGEXP = 64
    FAIL_EMAIL = 128
    FAIL_ZERO = 256
    FAIL_TYPE = 512  # value cannot be read as the declared kind
