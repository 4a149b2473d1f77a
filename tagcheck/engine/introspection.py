"""Read field declarations and values off record objects."""

import dataclasses
import typing
from typing import Any, Dict, List, Mapping
from pydantic import BaseModel

from tagcheck.enums import FieldKind
from tagcheck.models.field import FieldSpec


def _unwrap_annotation(tp: Any) -> Any:
    """Strip Annotated[...] wrappers."""
    while typing.get_origin(tp) is typing.Annotated:
        tp = typing.get_args(tp)[0]
    return tp


def _string_tags(source: Any) -> Dict[str, str]:
    """Keep only str -> str entries of a metadata mapping."""
    if not isinstance(source, Mapping):
        return {}
    return {key: value for key, value in source.items()
            if isinstance(key, str) and isinstance(value, str)}


def _pydantic_fields(cls: type) -> List[FieldSpec]:
    fields = []
    for name, info in cls.model_fields.items():
        fields.append(FieldSpec(
            name=name,
            kind=FieldKind.of_type(_unwrap_annotation(info.annotation)),
            tags=_string_tags(info.json_schema_extra),
            description=info.description,
        ))
    return fields


def _dataclass_fields(cls: type) -> List[FieldSpec]:
    # Resolves string annotations from `from __future__ import annotations`
    hints = typing.get_type_hints(cls)
    fields = []
    for f in dataclasses.fields(cls):
        fields.append(FieldSpec(
            name=f.name,
            kind=FieldKind.of_type(_unwrap_annotation(hints.get(f.name, f.type))),
            tags=_string_tags(f.metadata),
        ))
    return fields


def record_fields(record: Any) -> List[FieldSpec]:
    """
    List the fields of a record (or record type) in declaration order.

    Supports pydantic models, whose metadata lives in
    ``Field(json_schema_extra={...})``, and dataclasses, whose metadata lives
    in ``field(metadata={...})``. Anything else needs an explicit RecordSchema.
    """
    cls = record if isinstance(record, type) else type(record)

    if issubclass(cls, BaseModel):
        return _pydantic_fields(cls)
    if dataclasses.is_dataclass(cls):
        return _dataclass_fields(cls)

    raise TypeError(
        f"Cannot read field declarations from {cls.__name__}; "
        "use a pydantic model, a dataclass, or pass a RecordSchema"
    )


def read_value(record: Any, field: FieldSpec) -> Any:
    """Get the current value of a field, without modifying the record."""
    if isinstance(record, Mapping):
        value = record.get(field.name)
        # Missing keys read like an unassigned field
        return field.kind.zero_value() if value is None else value
    return getattr(record, field.name)
