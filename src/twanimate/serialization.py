"""
Serialization helpers for presets (rule table export for editor tooling).

Resolvers are code and are not serialized: a dynamic rule is exported as
its regex source and autocomplete hints only. Export is one-way.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from twanimate.model import Preset, Rule


def rule_to_dict(rule: Rule) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "pattern": rule.source,
        "static": rule.is_static,
        "autocomplete": list(rule.autocomplete),
    }
    if rule.is_static:
        d["declaration"] = dict(rule.body)
    return d


def preset_to_dict(p: Preset) -> Dict[str, Any]:
    return {
        "name": p.name,
        "rules": [rule_to_dict(r) for r in p.rules],
        "preflights": list(p.preflights),
    }


def preset_to_json(p: Preset) -> str:
    return json.dumps(preset_to_dict(p), sort_keys=True)


def preset_to_yaml(p: Preset) -> str:
    return yaml.safe_dump(preset_to_dict(p), sort_keys=False)
