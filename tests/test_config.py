"""
Tests for preset configuration loading and validation.
"""

import pytest
from twanimate.config import (
    PresetConfig,
    PresetConfigError,
    config_from_dict,
    config_from_yaml,
    config_to_dict,
    load_config,
)


class TestPresetConfig:
    """Test defaults and validation."""

    def test_defaults(self):
        config = PresetConfig()
        assert config.name == "tw-animate"
        assert config.variable_prefix == "un"
        assert config.preflight is True

    @pytest.mark.parametrize("kwargs", [
        {"name": ""},
        {"name": "   "},
        {"name": 3},
        {"variable_prefix": ""},
        {"variable_prefix": "Un"},
        {"variable_prefix": "--un"},
        {"variable_prefix": "9x"},
        {"preflight": "yes"},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(PresetConfigError):
            PresetConfig(**kwargs)

    def test_hyphenated_prefix(self):
        assert PresetConfig(variable_prefix="my-app").variable_prefix == "my-app"


class TestConfigFromDict:
    """Test mapping input."""

    def test_none_gives_defaults(self):
        assert config_from_dict(None) == PresetConfig()

    def test_partial(self):
        assert config_from_dict({"preflight": False}) == PresetConfig(preflight=False)

    def test_unknown_key_warns(self):
        with pytest.warns(UserWarning, match="colour"):
            config = config_from_dict({"colour": "red", "name": "x"})
        assert config.name == "x"

    def test_not_a_mapping(self):
        with pytest.raises(PresetConfigError):
            config_from_dict(["name"])

    def test_to_dict(self):
        assert config_to_dict(PresetConfig(name="x")) == {
            "name": "x",
            "variable_prefix": "un",
            "preflight": True,
        }


class TestConfigFromYaml:
    """Test YAML input."""

    def test_yaml(self):
        config = config_from_yaml("name: motion\nvariable_prefix: tw\npreflight: false\n")
        assert config == PresetConfig(name="motion", variable_prefix="tw", preflight=False)

    def test_empty_yaml(self):
        assert config_from_yaml("") == PresetConfig()

    def test_invalid_yaml(self):
        with pytest.raises(PresetConfigError):
            config_from_yaml("name: [unclosed")

    def test_load_config(self, tmp_path):
        path = tmp_path / "preset.yaml"
        path.write_text("variable_prefix: tw\n", encoding="utf-8")
        assert load_config(str(path)).variable_prefix == "tw"

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))
