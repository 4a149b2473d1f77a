"""Record schema: an explicit, ordered table of field declarations."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from omegaconf import DictConfig, OmegaConf

from tagcheck.enums import FailureReason, FieldKind
from tagcheck.models.field import FieldSpec
from tagcheck.models.options import ValidationOptions
from tagcheck.engine.introspection import record_fields
from tagcheck.engine.validator import validate


class RecordSchema(BaseModel):
    """Field declarations of one record type, in declaration order."""
    name: str = Field(..., description="Schema name")
    description: str = Field(default="", description="Schema description")
    fields: List[FieldSpec] = Field(default_factory=list, description="Fields in declaration order")

    def add_field(self, field: FieldSpec):
        """Add a field declaration to this schema."""
        if self.get_field(field.name) is not None:
            raise ValueError(f"Field '{field.name}' is already declared on schema '{self.name}'")
        self.fields.append(field)

    def get_field(self, name: str) -> Optional[FieldSpec]:
        """Get field declaration by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def get_fields_by_kind(self, kind: FieldKind) -> List[FieldSpec]:
        """Get all fields of a specific kind."""
        return [field for field in self.fields if field.kind == kind]

    @classmethod
    def from_record(cls, record: Any, name: Optional[str] = None) -> "RecordSchema":
        """Build a schema by introspecting a pydantic model or dataclass."""
        record_type = record if isinstance(record, type) else type(record)
        return cls(
            name=name or record_type.__name__,
            description=(record_type.__doc__ or "").strip(),
            fields=record_fields(record_type),
        )

    @classmethod
    def from_config(cls, cfg: Union[DictConfig, Mapping[str, Any]]) -> "RecordSchema":
        """Build a schema from a Hydra/OmegaConf node or a plain mapping."""
        if isinstance(cfg, DictConfig):
            cfg = OmegaConf.to_container(cfg, resolve=True)
        return cls.model_validate(dict(cfg))

    def validate_record(
        self, record: Any, options: Optional[ValidationOptions] = None
    ) -> Tuple[bool, Dict[str, FailureReason]]:
        """Validate a record (object or mapping) against this schema's fields."""
        return validate(record, options, fields=self.fields)

    def validate_records(
        self, records: List[Any], options: Optional[ValidationOptions] = None
    ) -> List[Tuple[bool, Dict[str, FailureReason]]]:
        """Validate each record in turn."""
        return [self.validate_record(record, options) for record in records]
