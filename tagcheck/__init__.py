"""tagcheck - declarative field validation driven by metadata tags."""

from tagcheck.enums import FieldKind, ConstraintFlag, FailureReason
from tagcheck.errors import ConstraintConfigError
from tagcheck.models import (
    Constraint,
    FieldSpec,
    ValidationOptions,
    RecordSchema,
    SchemaRegistry
)
from tagcheck.engine import (
    parse_constraint,
    build_constraint,
    compile_pattern,
    evaluate,
    validate,
    describe_failure,
    format_failures
)
from tagcheck.config import load_run_config

__all__ = [
    # Enums
    "FieldKind",
    "ConstraintFlag",
    "FailureReason",
    # Errors
    "ConstraintConfigError",
    # Models
    "Constraint",
    "FieldSpec",
    "ValidationOptions",
    "RecordSchema",
    "SchemaRegistry",
    # Engine
    "parse_constraint",
    "build_constraint",
    "compile_pattern",
    "evaluate",
    "validate",
    "describe_failure",
    "format_failures",
    # Config
    "load_run_config",
]
