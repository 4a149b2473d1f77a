"""Resolved constraint for a single field."""

import re
from pydantic import BaseModel, Field
from typing import Optional, Set

from tagcheck.enums import ConstraintFlag

# Sentinel for an unset length bound
UNSET = -1


class Constraint(BaseModel):
    """Validation rules for one field, built fresh for every validation run."""
    len_min: int = Field(default=UNSET, description="Minimum string length (-1 when unset)")
    len_max: int = Field(default=UNSET, description="Maximum string length (-1 when unset)")
    val_min: int = Field(default=0, description="Minimum integer value")
    val_max: int = Field(default=0, description="Maximum integer value")
    min_explicit_zero: bool = Field(default=False, description="val_min was declared as exactly 0")
    max_explicit_zero: bool = Field(default=False, description="val_max was declared as exactly 0")
    required: bool = Field(default=False, description="Empty strings and unset integers are rejected")
    email: bool = Field(default=False, description="Value must look like an email address")
    pattern: Optional[re.Pattern] = Field(default=None, description="Custom pattern the value must match")

    @property
    def flags(self) -> Set[ConstraintFlag]:
        """Flags active on this constraint."""
        flags = set()
        if self.required:
            flags.add(ConstraintFlag.REQUIRED)
        if self.email:
            flags.add(ConstraintFlag.EMAIL)
        if self.min_explicit_zero:
            flags.add(ConstraintFlag.VAL_MIN_EXPLICIT_ZERO)
        if self.max_explicit_zero:
            flags.add(ConstraintFlag.VAL_MAX_EXPLICIT_ZERO)
        return flags

    @property
    def has_value_bounds(self) -> bool:
        """Whether any integer bound was declared."""
        return (self.val_min != 0 or self.val_max != 0
                or self.min_explicit_zero or self.max_explicit_zero)

    @property
    def zero_allowed(self) -> bool:
        """Whether a required integer may hold 0."""
        return self.min_explicit_zero or self.max_explicit_zero
