import os

import pytest

from core import ConfigurationError
from render_server.config import (
    SEED_ENV,
    WORKERS_ENV,
    resolve_seed,
    resolve_tile_size,
    resolve_workers,
)


def test_explicit_workers_win(monkeypatch):
    monkeypatch.setenv(WORKERS_ENV, "7")
    assert resolve_workers(3) == 3


def test_workers_from_environment(monkeypatch):
    monkeypatch.setenv(WORKERS_ENV, "5")
    assert resolve_workers() == 5


def test_workers_default_to_cpu_count(monkeypatch):
    monkeypatch.delenv(WORKERS_ENV, raising=False)
    assert resolve_workers() == (os.cpu_count() or 1)


@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_bad_worker_environment(monkeypatch, value):
    monkeypatch.setenv(WORKERS_ENV, value)
    with pytest.raises(ConfigurationError):
        resolve_workers()


def test_seed_from_environment(monkeypatch):
    monkeypatch.setenv(SEED_ENV, "0x10")
    assert resolve_seed() == 16
    assert resolve_seed(4) == 4


def test_seed_defaults_to_none(monkeypatch):
    monkeypatch.delenv(SEED_ENV, raising=False)
    assert resolve_seed() is None


def test_tile_size():
    assert resolve_tile_size(16) == (16, 16)
    assert resolve_tile_size((8, 4)) == (8, 4)
    with pytest.raises(ConfigurationError):
        resolve_tile_size((0, 4))
