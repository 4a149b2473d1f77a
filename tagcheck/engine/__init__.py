"""Constraint parsing, evaluation and the validation engine."""

from tagcheck.engine.parser import parse_constraint, build_constraint, compile_pattern
from tagcheck.engine.evaluator import evaluate, convert_value, EMAIL_PATTERN
from tagcheck.engine.introspection import record_fields, read_value
from tagcheck.engine.validator import validate, resolve_constraint, apply_suffix_conventions
from tagcheck.engine.report import describe_failure, format_failures

__all__ = [
    "parse_constraint",
    "build_constraint",
    "compile_pattern",
    "evaluate",
    "convert_value",
    "EMAIL_PATTERN",
    "record_fields",
    "read_value",
    "validate",
    "resolve_constraint",
    "apply_suffix_conventions",
    "describe_failure",
    "format_failures",
]
