from __future__ import annotations

"""
Unit tests for report configuration validation.
"""

import pytest

from inlining_log.domain.config import get_default_report_config, validate_report_config


def test_none_yields_defaults():
    cfg, warnings = validate_report_config(None)
    assert cfg == get_default_report_config()
    assert warnings == []


def test_values_are_normalized():
    cfg, warnings = validate_report_config(
        {"format": " LIST ", "log_level": "debug", "save_path": " out/report.txt "}
    )

    assert cfg["format"] == "list"
    assert cfg["log_level"] == "DEBUG"
    assert cfg["save_path"] == "out/report.txt"
    assert cfg["print_to_log"] is False
    assert warnings == []


def test_invalid_values_fall_back_with_warnings():
    cfg, warnings = validate_report_config(
        {"format": "graph", "print_to_log": "yes", "save_path": 3, "colour": True}
    )

    assert cfg["format"] == "tree"
    assert cfg["print_to_log"] is True
    assert cfg["save_path"] == ""
    assert "colour" not in cfg
    assert len(warnings) == 4


def test_non_dict_falls_back_to_defaults():
    cfg, warnings = validate_report_config(["tree"])
    assert cfg == get_default_report_config()
    assert len(warnings) == 1


def test_strict_mode_raises():
    with pytest.raises(ValueError):
        validate_report_config({"format": "graph"}, strict=True)
    with pytest.raises(TypeError):
        validate_report_config({"print_to_log": "maybe"}, strict=True)
    with pytest.raises(TypeError):
        validate_report_config("tree", strict=True)
