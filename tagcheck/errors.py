"""Errors raised for broken constraint declarations."""

from typing import Optional


class ConstraintConfigError(ValueError):
    """A constraint declaration cannot be used (e.g. a malformed pattern).

    This signals a mistake in how a record type was annotated, not bad data
    in a record, so it is raised instead of being reported as a failure.
    """

    def __init__(self, pattern: str, reason: str, field_name: Optional[str] = None):
        self.pattern = pattern
        self.reason = reason
        self.field_name = field_name
        where = f" on field '{field_name}'" if field_name else ""
        super().__init__(f"Invalid pattern {pattern!r}{where}: {reason}")
