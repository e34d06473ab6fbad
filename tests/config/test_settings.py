"""Tests for LabSettings."""

import pytest
from pydantic import ValidationError

from prototypelab.config import LabSettings


def test_defaults(settings):
    assert settings.hero_name == "Hero"
    assert (settings.hero_health, settings.hero_experience, settings.hero_level) == (100, 0, 1)
    assert settings.clone_suffix == " (clone)"
    assert (settings.damage_amount, settings.heal_amount, settings.experience_amount) == (10, 10, 60)
    assert (settings.default_batch_size, settings.max_batch_size) == (5, 1000)


def test_loads_from_environment(monkeypatch):
    monkeypatch.setenv("PROTOTYPE_LAB_HERO_NAME", "Knight")
    monkeypatch.setenv("PROTOTYPE_LAB_DAMAGE_AMOUNT", "25")
    monkeypatch.setenv("PROTOTYPE_LAB_DEFAULT_BATCH_SIZE", "10")

    settings = LabSettings(_env_file=None)

    assert settings.hero_name == "Knight"
    assert settings.damage_amount == 25
    assert settings.default_batch_size == 10


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("PROTOTYPE_LAB_HERO_NAME", "Knight")

    settings = LabSettings(_env_file=None, hero_name="Rogue")

    assert settings.hero_name == "Rogue"


def test_loads_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PROTOTYPE_LAB_HEAL_AMOUNT=30\nUNRELATED=1\n", encoding="utf-8")

    settings = LabSettings(_env_file=env_file)

    assert settings.heal_amount == 30


@pytest.mark.parametrize(
    "kwargs",
    [
        {"default_batch_size": 0},
        {"max_batch_size": 0},
        {"default_batch_size": 20, "max_batch_size": 10},
        {"hero_health": "lots"},
    ],
    ids=["zero-default", "zero-max", "default-over-max", "non-int"],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValidationError):
        LabSettings(_env_file=None, **kwargs)
