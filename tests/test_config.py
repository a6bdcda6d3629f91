"""
Test ion matching configuration.
"""

import logging

from ionmatch.config import IonMatchConfig
from ionmatch.constants import DEFAULT_CONFIG


def test_defaults():
    """Test default settings."""
    config = IonMatchConfig()

    assert config.to_dict() == DEFAULT_CONFIG
    assert config["min_isotope"] == 0
    assert config["max_isotope"] == 1
    assert not config.is_fragment_ppm()
    assert config.is_precursor_ppm()


def test_update():
    """Test updating settings."""
    config = IonMatchConfig({"fragment_error_units": "ppm", "max_isotope": 3})

    assert config.is_fragment_ppm()
    assert config.get("max_isotope") == 3


def test_unknown_keys_are_ignored(caplog):
    """Test that unknown keys are logged and dropped."""
    with caplog.at_level(logging.WARNING, logger="ionmatch.config"):
        config = IonMatchConfig({"threads": 8})

    assert "threads" not in config
    assert "Unknown configuration key: threads" in caplog.text


def test_item_access():
    """Test mapping-style access."""
    config = IonMatchConfig()
    config["ion_series"] = "cz"
    config.set("min_mz", 150.0)

    assert config["ion_series"] == "cz"
    assert config.get("missing", 42) == 42
    assert "min_mz" in config


def test_to_dict_is_a_copy():
    config = IonMatchConfig()
    data = config.to_dict()
    data["ion_series"] = "ax"

    assert config["ion_series"] == "by"
    assert DEFAULT_CONFIG["ion_series"] == "by"
