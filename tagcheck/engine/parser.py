"""Parser for the constraint tag language.

A constraint string is a whitespace separated list of tokens::

    req email lenmin:5 lenmax:25 valmin:0 valmax:9999 regexp:^[A-Z]+$

Tokens are applied left to right and later tokens win. Integer arguments that
do not parse are ignored and leave the bound unset; a pattern that does not
compile raises ConstraintConfigError.
"""

import re
import logging
from typing import Optional

from tagcheck.errors import ConstraintConfigError
from tagcheck.models.constraint import Constraint

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits, nothing else (no spaces, no underscores)
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

_BOUND_KEYS = ("lenmin", "lenmax", "valmin", "valmax")


def parse_int(raw: str) -> Optional[int]:
    """Parse a signed 64-bit integer, None when ill-formed."""
    if not _INT_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def compile_pattern(raw: str, field_name: Optional[str] = None) -> re.Pattern:
    """Compile a custom pattern, failing loudly on bad syntax."""
    try:
        return re.compile(raw)
    except re.error as e:
        raise ConstraintConfigError(raw, str(e), field_name=field_name) from e


def _apply_bound(constraint: Constraint, key: str, value: int):
    if key == "lenmin":
        constraint.len_min = value
    elif key == "lenmax":
        constraint.len_max = value
    elif key == "valmin":
        constraint.val_min = value
        if value == 0:
            constraint.min_explicit_zero = True
    elif key == "valmax":
        constraint.val_max = value
        if value == 0:
            constraint.max_explicit_zero = True


def parse_constraint(tag: str, field_name: Optional[str] = None) -> Constraint:
    """Turn a constraint string into a Constraint."""
    constraint = Constraint()

    for token in (tag or "").split():
        if token == "req":
            constraint.required = True
            continue
        if token == "email":
            constraint.email = True
            continue

        key, sep, arg = token.partition(":")
        if not sep:
            logger.debug(f"Ignoring unknown token {token!r}")
            continue

        if key == "regexp":
            # The argument may itself contain colons
            constraint.pattern = compile_pattern(arg, field_name=field_name)
        elif key in _BOUND_KEYS:
            value = parse_int(arg)
            if value is None:
                logger.debug(f"Ignoring ill-formed integer in token {token!r}")
                continue
            _apply_bound(constraint, key, value)
        else:
            logger.debug(f"Ignoring unknown token {token!r}")

    return constraint


def build_constraint(tag: str, regexp_tag: str = "", field_name: Optional[str] = None) -> Constraint:
    """Parse a constraint string and apply the standalone pattern string on top."""
    constraint = parse_constraint(tag, field_name=field_name)
    if regexp_tag:
        constraint.pattern = compile_pattern(regexp_tag, field_name=field_name)
    return constraint
