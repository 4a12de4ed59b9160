"""
Token Matcher

Maps a class-name token to (family, coefficient, literal suffix).

Shapes, tried per family in this order:
    - bare name            fade-in, -spin-in, slide-in-from-top
    - parametrized name    fade-in-50, -zoom-out-[1/2], slide-out-to-left-4

A leading "-" negates the coefficient on sign-bearing families; a
direction word looks its coefficient up in the family table.

Malformed literals do not raise: the whole token simply does not match.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from twanimate.model import Declaration, TransformGroup, UtilityFamily
from twanimate.transforms import default_value, parse_value


logger = logging.getLogger(__name__)


VERTICAL = (("top", -1), ("bottom", 1))
HORIZONTAL = (("left", -1), ("right", 1))
LOGICAL = (("start", -1), ("end", 1))


def build_families(variable_prefix: str = "un") -> Tuple[UtilityFamily, ...]:
    """
    Build the ordered family table for a custom-property prefix.

    Args:
        variable_prefix: Prefix of every custom property ("un" -> --un-enter-opacity)

    Returns:
        Families in matching order
    """
    enter = f"--{variable_prefix}-enter"
    exit_ = f"--{variable_prefix}-exit"

    families = [
        UtilityFamily("fade-in", f"{enter}-opacity", TransformGroup.OPACITY),
        UtilityFamily("fade-out", f"{exit_}-opacity", TransformGroup.OPACITY),
        UtilityFamily("zoom-in", f"{enter}-scale", TransformGroup.SCALE, signed=True),
        UtilityFamily("zoom-out", f"{exit_}-scale", TransformGroup.SCALE, signed=True),
        UtilityFamily("spin-in", f"{enter}-rotate", TransformGroup.ROTATION, signed=True, signed_bare=True),
        UtilityFamily("spin-out", f"{exit_}-rotate", TransformGroup.ROTATION, signed=True, signed_bare=True),
    ]
    for prefix, var in (("slide-in-from", f"{enter}-translate"), ("slide-out-to", f"{exit_}-translate")):
        families.append(UtilityFamily(prefix, f"{var}-y", TransformGroup.TRANSLATION, directions=VERTICAL))
        families.append(UtilityFamily(prefix, f"{var}-x", TransformGroup.TRANSLATION, directions=HORIZONTAL))
        families.append(UtilityFamily(prefix, f"{var}-x", TransformGroup.TRANSLATION, directions=LOGICAL))
    return tuple(families)


DEFAULT_FAMILIES = build_families()


@dataclass(frozen=True)
class TokenMatch:
    """
    Result of matching a token against a family.

    Properties:
        family: The matched UtilityFamily
        coefficient: +1 or -1
        literal: Raw literal suffix, or None for the bare shape
    """

    family: UtilityFamily
    coefficient: int = 1
    literal: Optional[str] = None

    @classmethod
    def from_regex(cls, family: UtilityFamily, m: re.Match) -> "TokenMatch":
        groups = m.groupdict()
        coefficient = 1
        if groups.get("sign") == "-":
            coefficient = -1
        direction = groups.get("direction")
        if direction is not None:
            coefficient *= family.direction_coefficient(direction)
        return cls(family=family, coefficient=coefficient, literal=groups.get("literal"))


def match_token(token: str, families: Iterable[UtilityFamily] = DEFAULT_FAMILIES) -> Optional[TokenMatch]:
    """
    Find the family a token belongs to.

    Args:
        token: Class name
        families: Ordered family table

    Returns:
        TokenMatch, or None if no family shape fits
    """
    for family in families:
        m = family.bare_pattern.match(token)
        if m is None:
            m = family.parametrized_pattern.match(token)
        if m is not None:
            return TokenMatch.from_regex(family, m)
    return None


def resolve_match(match: TokenMatch) -> Optional[Declaration]:
    """Turn a TokenMatch into a Declaration, or None for a malformed literal."""
    if match.literal is None:
        value = default_value(match.family, match.coefficient)
    else:
        value = parse_value(match.family, match.literal, match.coefficient)
        if value is None:
            logger.debug("Malformed %s literal %r", match.family.label, match.literal)
            return None
    return {match.family.property: value}


def resolve_token(token: str, families: Iterable[UtilityFamily] = DEFAULT_FAMILIES) -> Optional[Declaration]:
    """Match and resolve ``token`` in one step."""
    match = match_token(token, families)
    if match is None:
        return None
    return resolve_match(match)


__all__ = [
    "TokenMatch",
    "DEFAULT_FAMILIES",
    "build_families",
    "match_token",
    "resolve_match",
    "resolve_token",
]
