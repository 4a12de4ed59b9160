"""
Rule Table Builder

Composes the declarative rule table exposed to the host engine:

    1. Base rules     animate-in, animate-out, accordion, collapsible, caret-blink
    2. Fade rules     fade-in, fade-in-<num>, ...
    3. Zoom rules     zoom-in, -zoom-in-<num>, ...
    4. Spin rules     spin-in, -spin-in, spin-in-<num>deg, ...
    5. Slide rules    slide-in-from-(top|bottom), slide-out-to-(left|right)-<num>, ...

Every family contributes a bare rule followed by a parametrized rule.
Bare rules for fade/zoom are static declarations; everything else goes
through the matcher and the value transformer.

The builder holds no state. Call it once when constructing the preset.
"""

from typing import List, Optional, Tuple

from twanimate.config import PresetConfig
from twanimate.literals import LiteralKind
from twanimate.matcher import TokenMatch, build_families, resolve_match
from twanimate.model import Preset, Rule, UtilityFamily
from twanimate.preflight import ANIMATION_CSS, render_animation_css
from twanimate.transforms import TRANSFORMS, default_value


def _animation(keyframes: str, prefix: str, duration: str) -> str:
    return (
        f"{keyframes} var(--{prefix}-animation-duration,var(--{prefix}-duration,{duration})) "
        f"var(--{prefix}-ease,ease) var(--{prefix}-animation-delay,0s) "
        f"var(--{prefix}-animation-iteration-count,1) var(--{prefix}-animation-direction,normal) "
        f"var(--{prefix}-animation-fill-mode,none)"
    )


def _height_animation(keyframes: str, prefix: str) -> str:
    return f"{keyframes} var(--{prefix}-animation-duration,var(--{prefix}-duration,200ms)) ease-out"


def build_base_rules(variable_prefix: str = "un") -> List[Rule]:
    """Fixed keyframe bindings with hard-coded durations."""
    p = variable_prefix
    return [
        Rule("animate-in", {"animation": _animation("enter", p, "150ms")}),
        Rule("animate-out", {"animation": _animation("exit", p, "150ms")}),
        Rule("animate-accordion-down", {"animation": _height_animation("accordion-down", p)}),
        Rule("animate-accordion-up", {"animation": _height_animation("accordion-up", p)}),
        Rule("animate-collapsible-down", {"animation": _height_animation("collapsible-down", p)}),
        Rule("animate-collapsible-up", {"animation": _height_animation("collapsible-up", p)}),
        Rule("animate-caret-blink", {"animation": "caret-blink 1.25s ease-out infinite"}),
    ]


def autocomplete_hints(family: UtilityFamily) -> Tuple[str, ...]:
    """Shape templates for the parametrized rule of ``family``."""
    shapes = ["<num>"]
    if LiteralKind.DEGREE in TRANSFORMS[family.group]:
        shapes.append("<num>deg")
    shapes.append("<percent>")

    hints = []
    for shape in shapes:
        hints.append(f"{family.label}-{shape}")
        hints.append(f"{family.label}-[{shape}]")
    return tuple(hints)


def _resolver(family: UtilityFamily):
    def resolve(m):
        return resolve_match(TokenMatch.from_regex(family, m))
    return resolve


def build_family_rules(family: UtilityFamily) -> List[Rule]:
    """Bare rule followed by parametrized rule for one family."""
    if family.is_static:
        bare = Rule(family.name, {family.property: default_value(family)})
    elif family.signed_bare:
        bare = Rule(family.bare_pattern, _resolver(family), (family.name, f"-{family.name}"))
    else:
        bare = Rule(family.bare_pattern, _resolver(family), (family.label,))

    parametrized = Rule(family.parametrized_pattern, _resolver(family), autocomplete_hints(family))
    return [bare, parametrized]


def build_rules(config: Optional[PresetConfig] = None) -> List[Rule]:
    """
    Build the full ordered rule table.

    Args:
        config: Preset options (defaults to PresetConfig())

    Returns:
        Base rules followed by the fade, zoom, spin and slide rules
    """
    if config is None:
        config = PresetConfig()

    rules = build_base_rules(config.variable_prefix)
    for family in build_families(config.variable_prefix):
        rules.extend(build_family_rules(family))
    return rules


def build_preset(config: Optional[PresetConfig] = None) -> Preset:
    """
    Build the preset handed to the host engine.

    Example:
        preset = build_preset()
        preset.resolve("spin-out-[45deg]")
        # {'--un-exit-rotate': 'calc(45deg * 1)'}
    """
    if config is None:
        config = PresetConfig()

    preflights = []
    if config.preflight:
        if config.variable_prefix == "un":
            preflights.append(ANIMATION_CSS)
        else:
            preflights.append(render_animation_css(config.variable_prefix))

    return Preset(name=config.name, rules=build_rules(config), preflights=preflights)


__all__ = [
    "build_base_rules",
    "build_family_rules",
    "build_rules",
    "build_preset",
    "autocomplete_hints",
]
