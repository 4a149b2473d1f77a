"""Constraint, option and schema models package."""

from tagcheck.models.constraint import Constraint
from tagcheck.models.field import FieldSpec
from tagcheck.models.options import ValidationOptions
from tagcheck.models.schema import RecordSchema
from tagcheck.models.registry import SchemaRegistry

__all__ = [
    "Constraint",
    "FieldSpec",
    "ValidationOptions",
    "RecordSchema",
    "SchemaRegistry",
]
