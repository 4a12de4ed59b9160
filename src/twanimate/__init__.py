"""
twanimate: enter/exit animation utilities for atomic-CSS engines

Resolves utility class names such as ``fade-in-50``, ``-zoom-out-[1/2]``
or ``slide-in-from-top-4`` into CSS custom-property declarations.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - How the host engine scans documents for tokens
    - How declarations are turned into stylesheet text
    - Selectors, variants or caching

It resolves ONE token at a time into a Declaration, or None.

Entry point: twanimate.rules.build_preset()
"""

__version__ = "0.1.0"
