"""
Test cases for environment-driven configuration.
"""

import importlib

import pytest

import vector_db.config as config_module
from vector_db.config import Config


def test_defaults_validate():
    cfg = Config(delimiter=",", on_dimension_mismatch="skip", dimension=None)

    cfg.validate()


@pytest.mark.parametrize(
    "overrides",
    [
        {"delimiter": ""},
        {"delimiter": "::"},
        {"on_dimension_mismatch": "ignore"},
        {"dimension": 0},
    ],
)
def test_invalid_values_rejected(overrides):
    cfg = Config(**overrides)

    with pytest.raises(ValueError):
        cfg.validate()


def test_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("VECTOR_DB_DELIMITER", ";")
    monkeypatch.setenv("VECTOR_DB_ON_DIMENSION_MISMATCH", "raise")
    monkeypatch.setenv("VECTOR_DB_DIMENSION", "3")
    monkeypatch.setenv("VECTOR_DB_PREVIEW_ROWS", "2")

    try:
        reloaded = importlib.reload(config_module)
        cfg = reloaded.Config()

        assert cfg.delimiter == ";"
        assert cfg.on_dimension_mismatch == "raise"
        assert cfg.dimension == 3
        assert cfg.preview_rows == 2
    finally:
        monkeypatch.undo()
        importlib.reload(config_module)
