"""
Core Preset Model Objects

Defines the data structures shared by the matcher, the value
transformer and the rule table builder:

    - TransformGroup (which value table a family uses)
    - UtilityFamily (one animation utility and its token shapes)
    - Rule (one entry of the table handed to the host engine)
    - Preset (root container: rules + preflight CSS)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about how the host engine scans documents
        - Are immutable once built (Preset is only mutated while composing)
        - Never cache resolved tokens
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union


logger = logging.getLogger(__name__)


Declaration = Dict[str, str]
Resolver = Callable[[re.Match], Optional[Declaration]]


class TransformGroup(Enum):
    """Value tables available to utility families."""

    OPACITY = "opacity"
    SCALE = "scale"
    ROTATION = "rotation"
    TRANSLATION = "translation"


@dataclass(frozen=True)
class UtilityFamily:
    """
    One animation utility family, e.g. ``fade-in`` or ``slide-in-from``.

    Properties:
        name:
            Token prefix, e.g. "zoom-out", "slide-out-to"

        property:
            The single custom property this family writes,
            e.g. "--un-exit-scale"

        group:
            TransformGroup selecting the value table

        signed:
            Parametrized form accepts a leading "-" (zoom, spin)

        signed_bare:
            Bare form accepts a leading "-" (spin only)

        directions:
            Ordered (word, coefficient) pairs for directional families.
            Example: (("top", -1), ("bottom", 1))

    IMPORTANT:
        Family names must stay mutually exclusive as prefixes so a token
        can only ever match one family.
    """

    name: str
    property: str
    group: TransformGroup
    signed: bool = False
    signed_bare: bool = False
    directions: Tuple[Tuple[str, int], ...] = ()
    bare_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    parametrized_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # \Z, not $: a trailing newline is not part of any token.
        object.__setattr__(self, "bare_pattern",
                           re.compile(rf"^{self._stem(self.signed_bare)}\Z", re.ASCII))
        object.__setattr__(self, "parametrized_pattern",
                           re.compile(rf"^{self._stem(self.signed)}-(?P<literal>.+)\Z", re.ASCII))

    @property
    def label(self) -> str:
        """Human-readable shape, e.g. ``slide-in-from-(top|bottom)``."""
        if self.directions:
            return f"{self.name}-({'|'.join(word for word, _ in self.directions)})"
        return self.name

    @property
    def is_static(self) -> bool:
        """True when the bare form takes no sign and no direction."""
        return not self.signed_bare and not self.directions

    def _stem(self, signed: bool) -> str:
        sign = "(?P<sign>-?)" if signed else ""
        direction = ""
        if self.directions:
            direction = f"-(?P<direction>{'|'.join(word for word, _ in self.directions)})"
        return f"{sign}{self.name}{direction}"

    def direction_coefficient(self, word: str) -> Optional[int]:
        for direction, coefficient in self.directions:
            if direction == word:
                return coefficient
        return None


@dataclass(frozen=True)
class Rule:
    """
    One entry of the rule table.

    Properties:
        matcher:
            Exact token (static rule) or compiled, anchored regex

        body:
            Static Declaration, or a resolver called with the regex match
            that returns a Declaration or None

        autocomplete:
            Shape templates for editor tooling ("fade-in-<num>", ...).
            Purely descriptive; nothing parses them.
    """

    matcher: Union[str, re.Pattern]
    body: Union[Declaration, Resolver]
    autocomplete: Tuple[str, ...] = ()

    @property
    def is_static(self) -> bool:
        return isinstance(self.matcher, str)

    @property
    def source(self) -> str:
        """Exact token or regex source text."""
        if self.is_static:
            return self.matcher
        return self.matcher.pattern

    def resolve(self, token: str) -> Optional[Declaration]:
        """
        Resolve ``token`` against this rule.

        Returns:
            A fresh Declaration, or None when the rule does not apply
        """
        if self.is_static:
            if token == self.matcher:
                return dict(self.body)
            return None

        m = self.matcher.match(token)
        if not m:
            return None
        return self.body(m)


@dataclass
class Preset:
    """
    Root container handed to the host engine.

    Properties:
        name:
            Preset identifier (e.g. "tw-animate")

        rules:
            Ordered rule table; first rule producing a Declaration wins

        preflights:
            Static CSS blocks emitted once per stylesheet

    INVARIANTS:
        - At most one rule yields a Declaration for any token
        - Resolution never mutates the preset
    """

    name: str
    rules: List[Rule] = field(default_factory=list)
    preflights: List[str] = field(default_factory=list)

    def resolve(self, token: str) -> Optional[Declaration]:
        """
        Resolve a single class-name token.

        Args:
            token: Class name, e.g. "zoom-in-95"

        Returns:
            Declaration or None if no rule in this preset applies
        """
        for rule in self.rules:
            declaration = rule.resolve(token)
            if declaration is not None:
                return declaration
        logger.debug("No %s rule for token %r", self.name, token)
        return None

    def resolve_all(self, tokens: Iterable[str]) -> Dict[str, Declaration]:
        """Resolve many tokens, leaving out the ones that do not match."""
        resolved: Dict[str, Declaration] = {}
        for token in tokens:
            declaration = self.resolve(token)
            if declaration is not None:
                resolved[token] = declaration
        return resolved

    def get_rule(self, source: str) -> Optional[Rule]:
        """
        Retrieve a rule by its exact token or regex source.

        Returns:
            Rule object or None if not found
        """
        for rule in self.rules:
            if rule.source == source:
                return rule
        return None

    @property
    def autocomplete(self) -> List[str]:
        """All autocomplete templates in rule order."""
        return [hint for rule in self.rules for hint in rule.autocomplete]
