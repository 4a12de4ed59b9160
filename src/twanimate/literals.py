"""
Literal Extractor

Classifies the literal suffix of a utility token into one of four
lexical kinds:

    - NUMBER      50, 0.5, .5
    - PERCENTAGE  50%
    - RATIO       1/2
    - DEGREE      45deg

Every kind may also be written bracket-escaped (``[50%]``, ``[1/2]``).
The brackets are a lexical escape only; they are stripped before the
payload is used, so ``50`` and ``[50]`` decode to the same value.

ARCHITECTURAL RULE:
    This module knows nothing about CSS properties or utility families.
    It only answers "what shape is this text?".
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional


class LiteralKind(Enum):
    """Lexical shape of a literal suffix."""

    NUMBER = "number"
    PERCENTAGE = "percentage"
    RATIO = "ratio"
    DEGREE = "degree"


def _anchored(body: str) -> re.Pattern:
    # Either a balanced [body] or a bare body, always spanning the whole input.
    # ASCII digits only; \Z so a trailing newline never matches.
    return re.compile(rf"^(?:\[(?P<wrapped>{body})\]|(?P<bare>{body}))\Z", re.ASCII)


PATTERNS: Dict[LiteralKind, re.Pattern] = {
    LiteralKind.NUMBER: _anchored(r"\d+(?:\.\d+)?|\d*\.\d+"),
    LiteralKind.PERCENTAGE: _anchored(r"\d+(?:\.\d+)?%"),
    LiteralKind.RATIO: _anchored(r"\d+/\d+"),
    LiteralKind.DEGREE: _anchored(r"\d+(?:\.\d+)?deg"),
}


@dataclass(frozen=True)
class Literal:
    """
    A classified literal.

    Properties:
        kind: LiteralKind the text matched
        value: Payload text with any bracket escape removed ("50%", "1/2")
        bracketed: Whether the source text was bracket-wrapped

    IMPORTANT:
        value is kept as text. Arithmetic happens in the stylesheet,
        never here.
    """

    kind: LiteralKind
    value: str
    bracketed: bool = False


def extract_literal(text: str, kinds: Iterable[LiteralKind] = tuple(LiteralKind)) -> Optional[Literal]:
    """
    Classify ``text`` against ``kinds`` in the given order.

    Args:
        text: Literal suffix, e.g. "50", "[45deg]"
        kinds: Kinds to try, first match wins

    Returns:
        Literal, or None when no kind matches the whole text
    """
    for kind in kinds:
        m = PATTERNS[kind].match(text)
        if m:
            wrapped = m.group("wrapped")
            if wrapped is not None:
                return Literal(kind=kind, value=wrapped, bracketed=True)
            return Literal(kind=kind, value=m.group("bare"))
    return None


__all__ = ["LiteralKind", "Literal", "PATTERNS", "extract_literal"]
