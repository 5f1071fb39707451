"""Tests for the static toolkit configuration."""

import pytest

from psit.config import DEFAULT_CONFIG_PATH, PSITConfig, load_config


def test_default_config_file_loads() -> None:
    config = load_config(DEFAULT_CONFIG_PATH)
    assert config.version == "1.4.0"
    assert config.debug_enabled is False
    assert config.base_title == "PSIT Admin Toolkit"
    assert config.title == "PSIT Admin Toolkit v1.4.0"


def test_from_dict_maps_pascal_case_and_ignores_unknown_keys() -> None:
    config = PSITConfig.from_dict({"DebugEnabled": True, "DebugLevel": 3, "Version": "1.0", "Bogus": 1})
    assert config.debug_enabled is True
    assert config.debug_level == 3
    assert config.version == "1.0"
    assert not hasattr(config, "bogus")


def test_to_dict_uses_record_field_names() -> None:
    keys = set(PSITConfig().to_dict())
    assert keys == {"DebugEnabled", "DebugLevel", "Version", "ShowMDHelp", "ModulePath",
                    "Help", "EnableCustomTitle", "BaseTitle", "LogToFile"}


def test_non_object_json_is_rejected(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_missing_file_raises_os_error(tmp_path) -> None:
    with pytest.raises(OSError):
        load_config(str(tmp_path / "nope.json"))
