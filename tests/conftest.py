"""Shared test fixtures."""

import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from prototypelab import LabSession, LabSettings, Player, Roster


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep PROTOTYPE_LAB_* variables from the host out of settings."""
    for key in list(os.environ):
        if key.startswith("PROTOTYPE_LAB_"):
            monkeypatch.delenv(key)


@pytest.fixture
def hero():
    """Fresh level-1 hero with default stats."""
    return Player("Hero", 100, 0, 1)


@pytest.fixture
def roster(hero):
    """Roster holding only the hero as original."""
    r = Roster()
    r.set_original(hero)
    return r


@pytest.fixture
def settings():
    return LabSettings(_env_file=None)


@pytest.fixture
def session(settings):
    """Fresh session with default settings."""
    return LabSession(settings)
