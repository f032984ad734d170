from pathlib import Path

import pytest
from pydantic import ValidationError

from wxlog.config import load_config, log_level
from wxlog.models import DEFAULT_FIELDS, StoreConfig


def test_defaults():
    cfg = StoreConfig()
    assert cfg.fields == ("day", "condition", "high", "low")
    assert cfg.numeric_field == "high"
    assert cfg.path == Path("data") / "store.txt"


def test_config_is_frozen():
    cfg = StoreConfig()
    with pytest.raises(ValidationError):
        cfg.numeric_field = "low"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"fields": ()},
        {"fields": ("day", "day")},
        {"fields": ("day", "a|b")},
        {"fields": ("day", "a=b")},
        {"fields": ("day", "")},
        {"numeric_field": "wind"},
    ],
)
def test_invalid_configs(kwargs):
    with pytest.raises(ValidationError):
        StoreConfig(**kwargs)


def test_empty_numeric_field_allowed():
    assert StoreConfig(numeric_field="").numeric_field == ""


def test_load_config_defaults():
    cfg = load_config({})
    assert cfg.fields == DEFAULT_FIELDS
    assert cfg.numeric_field == "high"
    assert cfg.path == Path("data") / "store.txt"


def test_load_config_from_env(tmp_path):
    env = {
        "WXLOG_STORE_PATH": str(tmp_path / "w.txt"),
        "WXLOG_FIELDS": " day, temp ,,",
        "WXLOG_NUMERIC_FIELD": "temp",
    }
    cfg = load_config(env)
    assert cfg.path == tmp_path / "w.txt"
    assert cfg.fields == ("day", "temp")
    assert cfg.numeric_field == "temp"


def test_load_config_empty_numeric_disables_total():
    assert load_config({"WXLOG_NUMERIC_FIELD": ""}).numeric_field == ""


def test_log_level():
    import logging

    assert log_level({}) == logging.WARNING
    assert log_level({"WXLOG_LOG_LEVEL": "info"}) == logging.INFO
    assert log_level({"WXLOG_LOG_LEVEL": "chatty"}) == logging.WARNING
    assert log_level({}, verbose=True) == logging.DEBUG
