"""
Value Transformer

Turns a classified literal into the CSS value written to a family's
custom property.

Each TransformGroup owns an ordered table of LiteralKind -> formatter.
The key order of a table is also the order in which the extractor tries
literal kinds for that group.

ARCHITECTURAL RULE:
    Values are built as computed-value text (``calc(...)``), never
    evaluated to floats. The spacing scale and percentage basis are only
    known to the stylesheet at render time.
"""

from typing import Callable, Dict, Optional

from twanimate.literals import Literal, LiteralKind, extract_literal
from twanimate.model import TransformGroup, UtilityFamily


Formatter = Callable[[str, int], str]

SPIN_DEFAULT_DEGREES = 30
SLIDE_DEFAULT_PERCENT = 100


TRANSFORMS: Dict[TransformGroup, Dict[LiteralKind, Formatter]] = {
    TransformGroup.OPACITY: {
        LiteralKind.NUMBER: lambda value, coefficient: f"calc({value} / 100)",
        LiteralKind.RATIO: lambda value, coefficient: value,
        LiteralKind.PERCENTAGE: lambda value, coefficient: value,
    },
    TransformGroup.SCALE: {
        LiteralKind.NUMBER: lambda value, coefficient: f"calc({value} * {coefficient}%)",
        LiteralKind.RATIO: lambda value, coefficient: f"calc({value} * {coefficient})",
        LiteralKind.PERCENTAGE: lambda value, coefficient: f"calc({value} * {coefficient})",
    },
    TransformGroup.ROTATION: {
        LiteralKind.NUMBER: lambda value, coefficient: f"calc({value} * {coefficient}deg)",
        # value keeps its "deg" unit; a unitless angle is invalid inside rotate()
        LiteralKind.DEGREE: lambda value, coefficient: f"calc({value} * {coefficient})",
        LiteralKind.RATIO: lambda value, coefficient: f"calc({value} * {coefficient} * 360deg)",
        LiteralKind.PERCENTAGE: lambda value, coefficient: f"calc({value} * {coefficient} * 360deg)",
    },
    TransformGroup.TRANSLATION: {
        LiteralKind.NUMBER: lambda value, coefficient: f"calc(var(--spacing) * {value} * {coefficient})",
        LiteralKind.RATIO: lambda value, coefficient: f"calc({value} * {coefficient * 100}%)",
        LiteralKind.PERCENTAGE: lambda value, coefficient: f"calc({value} * {coefficient * 100}%)",
    },
}

# Bare tokens (no literal suffix)
DEFAULTS: Dict[TransformGroup, Callable[[int], str]] = {
    TransformGroup.OPACITY: lambda coefficient: "0",
    TransformGroup.SCALE: lambda coefficient: "0",
    TransformGroup.ROTATION: lambda coefficient: f"{coefficient * SPIN_DEFAULT_DEGREES}deg",
    TransformGroup.TRANSLATION: lambda coefficient: f"{coefficient * SLIDE_DEFAULT_PERCENT}%",
}


def accepted_kinds(family: UtilityFamily) -> tuple:
    """Literal kinds a family accepts, in extraction order."""
    return tuple(TRANSFORMS[family.group])


def transform(family: UtilityFamily, literal: Literal, coefficient: int = 1) -> Optional[str]:
    """
    Format ``literal`` for ``family``.

    Args:
        family: Family whose group selects the table
        literal: Classified literal
        coefficient: +1 or -1

    Returns:
        CSS value text, or None if the family has no rule for the kind
    """
    formatter = TRANSFORMS[family.group].get(literal.kind)
    if formatter is None:
        return None
    return formatter(literal.value, coefficient)


def parse_value(family: UtilityFamily, text: str, coefficient: int = 1) -> Optional[str]:
    """Extract a literal from ``text`` and transform it in one step."""
    literal = extract_literal(text, accepted_kinds(family))
    if literal is None:
        return None
    return transform(family, literal, coefficient)


def default_value(family: UtilityFamily, coefficient: int = 1) -> str:
    """Value for the bare token of ``family`` (``spin-in``, ``slide-in-from-top``)."""
    return DEFAULTS[family.group](coefficient)


__all__ = [
    "Formatter",
    "TRANSFORMS",
    "DEFAULTS",
    "SPIN_DEFAULT_DEGREES",
    "SLIDE_DEFAULT_PERCENT",
    "accepted_kinds",
    "transform",
    "parse_value",
    "default_value",
]
