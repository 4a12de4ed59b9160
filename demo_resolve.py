#!/usr/bin/env python3
"""
Demo: Resolve a handful of utility tokens through the preset.

Shows matched declarations, tokens that fall through, and the
autocomplete templates an editor would offer.
"""

from twanimate.config import PresetConfig
from twanimate.rules import build_preset
from twanimate.serialization import preset_to_yaml


TOKENS = [
    "animate-in",
    "fade-in",
    "fade-in-0",
    "zoom-in-95",
    "-zoom-out-[1/2]",
    "spin-in",
    "-spin-in",
    "spin-out-[45deg]",
    "slide-in-from-top",
    "slide-in-from-left-4",
    "slide-out-to-end-[50%]",
    "fade-in-abc",
    "bg-red-500",
]


def main():
    preset = build_preset()

    print("=" * 80)
    print(f"PRESET: {preset.name}")
    print("=" * 80)

    for token in TOKENS:
        declaration = preset.resolve(token)
        if declaration is None:
            print(f"  {token:<28} (no match)")
            continue
        for prop, value in declaration.items():
            print(f"  {token:<28} {prop}: {value}")

    print("\nAUTOCOMPLETE:")
    print("-" * 80)
    for hint in preset.autocomplete:
        print(f"  {hint}")

    print("\nRULE TABLE (YAML):")
    print("-" * 80)
    print(preset_to_yaml(build_preset(PresetConfig(preflight=False))))


if __name__ == "__main__":
    main()
