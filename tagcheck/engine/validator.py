"""Validation engine: run every eligible field of a record through its rules."""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from tagcheck.enums import FailureReason
from tagcheck.engine.evaluator import evaluate
from tagcheck.engine.introspection import read_value, record_fields
from tagcheck.engine.parser import build_constraint
from tagcheck.models.constraint import Constraint
from tagcheck.models.field import FieldSpec
from tagcheck.models.options import ValidationOptions

logger = logging.getLogger(__name__)

EMAIL_SUFFIX = "Email"
PRICE_SUFFIX = "Price"


def has_suffix(name: str, suffix: str) -> bool:
    """Match CamelCase (``ContactEmail``) and snake_case (``contact_email``) suffixes."""
    if name.endswith(suffix):
        return True
    lowered, suffix = name.lower(), suffix.lower()
    return lowered == suffix or lowered.endswith("_" + suffix)


def apply_suffix_conventions(name: str, constraint: Constraint) -> Constraint:
    """Infer rules from the field name without overriding declared ones."""
    if has_suffix(name, EMAIL_SUFFIX):
        constraint.email = True
    if has_suffix(name, PRICE_SUFFIX) and not constraint.has_value_bounds:
        constraint.val_min = 0
        constraint.min_explicit_zero = True
    return constraint


def resolve_tags(field: FieldSpec, options: ValidationOptions) -> Tuple[str, str]:
    """Get the raw constraint and pattern strings for a field, overrides applied."""
    tag_name, regexp_tag_name = options.tag_name, options.regexp_tag_name
    tag = field.tag(tag_name)
    regexp_tag = field.tag(regexp_tag_name)

    overrides = options.overrides_for(field.name)
    # An override only wins when it is non-empty
    if overrides.get(tag_name):
        tag = overrides[tag_name]
    if overrides.get(regexp_tag_name):
        regexp_tag = overrides[regexp_tag_name]
    return tag, regexp_tag


def resolve_constraint(field: FieldSpec, options: ValidationOptions) -> Constraint:
    """Build the Constraint a field is checked against in this run."""
    tag, regexp_tag = resolve_tags(field, options)
    constraint = build_constraint(tag, regexp_tag, field_name=field.name)
    if options.validate_when_suffix:
        apply_suffix_conventions(field.name, constraint)
    return constraint


def validate(
    record: Any,
    options: Optional[ValidationOptions] = None,
    fields: Optional[Iterable[FieldSpec]] = None,
) -> Tuple[bool, Dict[str, FailureReason]]:
    """
    Validate a record against the constraints declared on its fields.

    Args:
        record: pydantic model, dataclass instance, or a mapping when
            ``fields`` is given.
        options: run options; defaults apply when omitted.
        fields: explicit field declarations, used instead of introspection.

    Returns:
        ``(valid, failures)`` where ``failures`` maps each failed field name to
        the first rule it violated.

    Raises:
        ConstraintConfigError: a declared pattern does not compile.
    """
    if options is None:
        options = ValidationOptions()
    if fields is None:
        fields = record_fields(record)

    valid = True
    failures: Dict[str, FailureReason] = {}

    for field in fields:
        if not options.is_selected(field.name):
            logger.debug(f"Skipping {field.name}: not in restrict_fields")
            continue
        if not field.is_checkable():
            logger.debug(f"Skipping {field.name}: {field.kind.value} fields are not validated")
            continue

        constraint = resolve_constraint(field, options)
        reason = evaluate(read_value(record, field), constraint, kind=field.kind)
        if reason is not None:
            logger.debug(f"{field.name} failed with {reason.name}")
            valid = False
            failures[field.name] = reason

    return valid, failures
