"""
Static preflight CSS: root custom-property defaults and the keyframes the
animation utilities drive. Emitted once per stylesheet, independent of
which tokens are used.
"""

from string import Template


_ANIMATION_CSS = Template("""
  :root {
    /* Animation variables for enter/exit effects */
    --${prefix}-enter-opacity: 1;
    --${prefix}-enter-rotate: 0;
    --${prefix}-enter-scale: 1;
    --${prefix}-enter-translate-x: 0;
    --${prefix}-enter-translate-y: 0;
    --${prefix}-exit-opacity: 1;
    --${prefix}-exit-rotate: 0;
    --${prefix}-exit-scale: 1;
    --${prefix}-exit-translate-x: 0;
    --${prefix}-exit-translate-y: 0;
  }

  @keyframes enter {
    from {
      opacity: var(--${prefix}-enter-opacity, 1);
      transform: translate3d(var(--${prefix}-enter-translate-x, 0), var(--${prefix}-enter-translate-y, 0), 0)
        scale3d(var(--${prefix}-enter-scale, 1), var(--${prefix}-enter-scale, 1), var(--${prefix}-enter-scale, 1))
        rotate(var(--${prefix}-enter-rotate, 0));
    }
  }

  @keyframes exit {
    to {
      opacity: var(--${prefix}-exit-opacity, 1);
      transform: translate3d(var(--${prefix}-exit-translate-x, 0), var(--${prefix}-exit-translate-y, 0), 0)
        scale3d(var(--${prefix}-exit-scale, 1), var(--${prefix}-exit-scale, 1), var(--${prefix}-exit-scale, 1))
        rotate(var(--${prefix}-exit-rotate, 0));
    }
  }

  @keyframes accordion-down {
    from { height: 0; }
    to { height: var(--reka-accordion-content-height, var(--kb-accordion-content-height, auto)); }
  }

  @keyframes accordion-up {
    from { height: var(--reka-accordion-content-height, var(--kb-accordion-content-height, auto)); }
    to { height: 0; }
  }

  @keyframes collapsible-down {
    from { height: 0; }
    to { height: var(--reka-collapsible-content-height, var(--kb-collapsible-content-height, auto)); }
  }

  @keyframes collapsible-up {
    from { height: var(--reka-collapsible-content-height, var(--kb-collapsible-content-height, auto)); }
    to { height: 0; }
  }

  @keyframes caret-blink {
    0%, 70%, 100% { opacity: 1; }
    20%, 50% { opacity: 0; }
  }
""")


def render_animation_css(variable_prefix: str = "un") -> str:
    """Preflight CSS with every custom property under ``--<variable_prefix>-``."""
    return _ANIMATION_CSS.substitute(prefix=variable_prefix)


ANIMATION_CSS = render_animation_css()


__all__ = ["ANIMATION_CSS", "render_animation_css"]
