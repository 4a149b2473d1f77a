"""Schema registry for looking up record declarations by name."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Tuple

from tagcheck.enums import FailureReason
from tagcheck.models.options import ValidationOptions
from tagcheck.models.schema import RecordSchema


class SchemaRegistry(BaseModel):
    """Registry of record schemas, keyed by schema name."""
    schemas: Dict[str, RecordSchema] = Field(default_factory=dict, description="Record schemas")

    def add_schema(self, schema: RecordSchema):
        """Add a schema to the registry, replacing one with the same name."""
        self.schemas[schema.name] = schema

    def register_record_type(self, record_type: type, name: Optional[str] = None) -> RecordSchema:
        """Introspect a pydantic model or dataclass and register its schema."""
        schema = RecordSchema.from_record(record_type, name=name)
        self.add_schema(schema)
        return schema

    def get_schema(self, name: str) -> Optional[RecordSchema]:
        """Get a schema by name."""
        return self.schemas.get(name)

    def list_schemas(self) -> List[str]:
        """Names of all registered schemas."""
        return list(self.schemas)

    def validate_record(
        self, schema_name: str, record: Any, options: Optional[ValidationOptions] = None
    ) -> Tuple[bool, Dict[str, FailureReason]]:
        """Validate a record against a registered schema."""
        schema = self.get_schema(schema_name)
        if schema is None:
            raise KeyError(f"No schema registered under '{schema_name}'")
        return schema.validate_record(record, options)
