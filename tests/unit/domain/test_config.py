from __future__ import annotations

"""
Unit tests for configuration defaults, file loading and validation.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from treeshell.core.validator import validate_config
from treeshell.domain.config import get_default_config, load_config


def test_default_config_keys() -> None:
    """TC-01: Defaults prompt for the path and use basename naming."""
    cfg = get_default_config()

    assert cfg["input_path"] == ""
    assert cfg["naming_policy"] == "basename"
    assert cfg["input_mode"] == "token"
    assert cfg["follow_symlinks"] is False


def test_load_config_missing_file(tmp_path: Path) -> None:
    """TC-02: No file, plain defaults."""
    assert load_config(str(tmp_path / "config.json")) == get_default_config()


def test_load_config_merges_known_keys(tmp_path: Path) -> None:
    """TC-03: Known keys override defaults, unknown keys are dropped."""
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"naming_policy": "full_path", "bogus": 1}), encoding="utf-8")

    cfg = load_config(str(cfg_file))
    assert cfg["naming_policy"] == "full_path"
    assert "bogus" not in cfg


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_load_config_corrupted_file(tmp_path: Path, content: str) -> None:
    """TC-04: Corrupted content falls back to defaults."""
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(content, encoding="utf-8")

    assert load_config(str(cfg_file)) == get_default_config()


def test_load_config_uses_user_data_dir(tmp_path: Path) -> None:
    """TC-05: Without an explicit path the user data directory is used."""
    (tmp_path / "config.json").write_text(json.dumps({"locale": "es"}), encoding="utf-8")
    with patch("treeshell.domain.config.get_user_data_dir", return_value=str(tmp_path)):
        assert load_config()["locale"] == "es"

# -----------------------------------------------------------------------------
# VALIDATION
# -----------------------------------------------------------------------------

def test_validate_keeps_valid_config() -> None:
    """TC-06: A valid configuration passes without warnings."""
    clean, warnings = validate_config(get_default_config())
    assert clean == get_default_config()
    assert warnings == []


def test_validate_coerces_and_warns() -> None:
    """TC-07: Coercible values are converted with a warning."""
    clean, warnings = validate_config({"sort_entries": "yes", "naming_policy": "FULL_PATH"})

    assert clean["sort_entries"] is True
    assert clean["naming_policy"] == "full_path"
    assert len(warnings) == 1


def test_validate_rejects_unknown_choice() -> None:
    """TC-08: Unknown enum values fall back to defaults."""
    clean, warnings = validate_config({"input_mode": "telepathy", "log_level": 5})

    assert clean["input_mode"] == "token"
    assert clean["log_level"] == "WARNING"
    assert len(warnings) == 2


def test_validate_strict_mode_raises() -> None:
    """TC-09: Strict mode refuses bad values."""
    with pytest.raises(ValueError):
        validate_config({"naming_policy": "weird"}, strict=True)
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)


def test_validate_keeps_root_path_verbatim() -> None:
    """TC-10: The root path is not stripped or normalized."""
    clean, _ = validate_config({"input_path": " ./odd path "})
    assert clean["input_path"] == " ./odd path "


def test_validate_non_dict_returns_defaults() -> None:
    """TC-11: Garbage input yields defaults and a warning."""
    clean, warnings = validate_config(None)
    assert clean == get_default_config()
    assert warnings
