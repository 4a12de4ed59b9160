"""
Preset configuration.

A preset can be configured from a mapping, YAML text or a YAML file:

    name: tw-animate
    variable_prefix: un
    preflight: true

Unknown keys are ignored with a warning; invalid values raise
PresetConfigError.
"""

import re
import warnings
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml


_PREFIX_RE = re.compile(r"^[a-z][a-z0-9-]*$")


class PresetConfigError(Exception):
    """Raised when a preset configuration is invalid."""
    pass


@dataclass(frozen=True)
class PresetConfig:
    """
    Options for building a preset.

    Properties:
        name: Preset name reported to the host engine
        variable_prefix: Custom-property prefix ("un" -> --un-enter-scale)
        preflight: Whether the preset ships the static keyframes CSS
    """

    name: str = "tw-animate"
    variable_prefix: str = "un"
    preflight: bool = True

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise PresetConfigError(f"Preset name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.variable_prefix, str) or not _PREFIX_RE.match(self.variable_prefix):
            raise PresetConfigError(f"Invalid variable_prefix: {self.variable_prefix!r}")
        if not isinstance(self.preflight, bool):
            raise PresetConfigError(f"preflight must be true or false, got {self.preflight!r}")


def config_from_dict(d: Optional[Dict[str, Any]]) -> PresetConfig:
    if d is None:
        return PresetConfig()
    if not isinstance(d, dict):
        raise PresetConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

    known = {f.name for f in fields(PresetConfig)}
    for key in sorted(set(d) - known):
        warnings.warn(f"Unknown preset option ignored: {key}", UserWarning)

    return PresetConfig(**{k: v for k, v in d.items() if k in known})


def config_to_dict(config: PresetConfig) -> Dict[str, Any]:
    return {f.name: getattr(config, f.name) for f in fields(PresetConfig)}


def config_from_yaml(s: str) -> PresetConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise PresetConfigError(f"Invalid YAML configuration: {str(e)}")
    return config_from_dict(d)


def load_config(filepath: str) -> PresetConfig:
    """
    Load a preset configuration from a YAML file.

    Raises:
        FileNotFoundError: If file doesn't exist
        PresetConfigError: If the configuration is invalid
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Preset configuration not found: {filepath}")

    return config_from_yaml(content)


__all__ = [
    "PresetConfig",
    "PresetConfigError",
    "config_from_dict",
    "config_to_dict",
    "config_from_yaml",
    "load_config",
]
