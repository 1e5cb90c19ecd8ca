"""Environment overrides for library defaults."""

import importlib

import pytest

from paillier_crypto import config


@pytest.fixture()
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(monkeypatch, reload_config):
    for name in ("PAILLIER_KEY_BITS", "PAILLIER_PRIME_ITERATIONS", "PAILLIER_KEYGEN_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    cfg = reload_config()
    assert cfg.DEFAULT_BIT_LENGTH == 3072
    assert cfg.PRIME_ITERATIONS == 16
    assert cfg.KEYGEN_TIMEOUT is None


def test_environment_overrides(monkeypatch, reload_config):
    monkeypatch.setenv("PAILLIER_KEY_BITS", "1024")
    monkeypatch.setenv("PAILLIER_PRIME_ITERATIONS", "32")
    monkeypatch.setenv("PAILLIER_KEYGEN_TIMEOUT", "2.5")
    cfg = reload_config()
    assert cfg.DEFAULT_BIT_LENGTH == 1024
    assert cfg.PRIME_ITERATIONS == 32
    assert cfg.KEYGEN_TIMEOUT == 2.5


def test_blank_values_fall_back(monkeypatch, reload_config):
    monkeypatch.setenv("PAILLIER_KEY_BITS", " ")
    monkeypatch.setenv("PAILLIER_KEYGEN_TIMEOUT", "")
    cfg = reload_config()
    assert cfg.DEFAULT_BIT_LENGTH == 3072
    assert cfg.KEYGEN_TIMEOUT is None
