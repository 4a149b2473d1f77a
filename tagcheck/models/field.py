"""Field declaration model."""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, Optional

from tagcheck.enums import FieldKind


class FieldSpec(BaseModel):
    """A record field: its name, kind and attached metadata strings."""
    name: str = Field(..., description="Field name as declared on the record")
    kind: FieldKind = Field(..., description="Field kind")
    tags: Dict[str, str] = Field(default_factory=dict, description="Metadata strings keyed by tag name")
    description: Optional[str] = Field(default=None, description="Human-readable description")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate field name format."""
        if not v or not isinstance(v, str):
            raise ValueError("Field name must be a non-empty string")
        if not v.isidentifier():
            raise ValueError(f"Field name {v!r} is not a valid identifier")
        return v

    @field_validator('tags', mode='before')
    @classmethod
    def validate_tags(cls, v):
        """Drop null tag values (YAML `~`) so they read like missing tags."""
        if v is None:
            return {}
        return {key: value for key, value in dict(v).items() if value is not None}

    def tag(self, key: str) -> str:
        """Get a metadata string, empty when absent."""
        return self.tags.get(key, "")

    def is_checkable(self) -> bool:
        """Only string and integer fields are validated."""
        return self.kind in (FieldKind.STRING, FieldKind.INT)
