"""Caller-supplied options for one validation run."""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, Mapping, Set, Union
from omegaconf import DictConfig, OmegaConf

DEFAULT_TAG_NAME = "validation"
REGEXP_SUFFIX = "_regexp"


class ValidationOptions(BaseModel):
    """Options controlling which fields are checked and where rules come from."""
    restrict_fields: Set[str] = Field(default_factory=set, description="Only check these fields (empty = all)")
    overwrite_field_tags: Dict[str, Dict[str, str]] = Field(
        default_factory=dict,
        description="Per-field replacement of metadata strings, keyed by field name then metadata key"
    )
    overwrite_tag_name: str = Field(default="", description="Metadata key holding the constraint string")
    validate_when_suffix: bool = Field(default=False, description="Infer rules from Email/Price name suffixes")

    @field_validator('restrict_fields', mode='before')
    @classmethod
    def validate_restrict_fields(cls, v):
        """Accept any iterable of names, including None."""
        if v is None:
            return set()
        if isinstance(v, str):
            return {v}
        return set(v)

    @field_validator('overwrite_tag_name', mode='before')
    @classmethod
    def validate_overwrite_tag_name(cls, v):
        """Treat None like an empty tag name."""
        return "" if v is None else v

    @property
    def tag_name(self) -> str:
        """Metadata key of the constraint string."""
        return self.overwrite_tag_name or DEFAULT_TAG_NAME

    @property
    def regexp_tag_name(self) -> str:
        """Metadata key of the standalone pattern string."""
        return self.tag_name + REGEXP_SUFFIX

    def is_selected(self, field_name: str) -> bool:
        """Check whether a field passes the restriction list."""
        return not self.restrict_fields or field_name in self.restrict_fields

    def overrides_for(self, field_name: str) -> Dict[str, str]:
        """Get the metadata overrides for a field (may be empty)."""
        return self.overwrite_field_tags.get(field_name) or {}

    @classmethod
    def from_config(cls, cfg: Union[DictConfig, Mapping[str, Any], None]) -> "ValidationOptions":
        """Build options from a Hydra/OmegaConf node or a plain mapping."""
        if cfg is None:
            return cls()
        if isinstance(cfg, DictConfig):
            cfg = OmegaConf.to_container(cfg, resolve=True)
        return cls.model_validate(dict(cfg))
