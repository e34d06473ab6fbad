"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the lab
session: the starting hero, the fixed action amounts and batch cloning limits.

Usage:
    from prototypelab.config import LabSettings

    # Load from environment variables (PROTOTYPE_LAB_*)
    settings = LabSettings()

    # Or override with explicit values
    settings = LabSettings(hero_name="Knight", default_batch_size=10)
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prototypelab.core.player import CLONE_SUFFIX


class LabSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a lab session.

    Attributes:
        hero_name: Name of the original player created at session start.
        hero_health: Starting health of the original.
        hero_experience: Starting experience of the original.
        hero_level: Starting level of the original.
        clone_suffix: Marker appended to a duplicate's name.
        damage_amount: Health removed by the damage action.
        heal_amount: Health restored by the heal action.
        experience_amount: Experience granted by the experience action.
        default_batch_size: Clones made by mass clone when no count is given.
        max_batch_size: Largest count mass clone accepts.

    Environment Variables:
        PROTOTYPE_LAB_HERO_NAME
        PROTOTYPE_LAB_HERO_HEALTH
        PROTOTYPE_LAB_HERO_EXPERIENCE
        PROTOTYPE_LAB_HERO_LEVEL
        PROTOTYPE_LAB_CLONE_SUFFIX
        PROTOTYPE_LAB_DAMAGE_AMOUNT
        PROTOTYPE_LAB_HEAL_AMOUNT
        PROTOTYPE_LAB_EXPERIENCE_AMOUNT
        PROTOTYPE_LAB_DEFAULT_BATCH_SIZE
        PROTOTYPE_LAB_MAX_BATCH_SIZE
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOTYPE_LAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hero_name: str = "Hero"
    hero_health: int = 100
    hero_experience: int = 0
    hero_level: int = 1
    clone_suffix: str = CLONE_SUFFIX
    damage_amount: int = 10
    heal_amount: int = 10
    experience_amount: int = 60
    default_batch_size: int = Field(default=5, ge=1)
    max_batch_size: int = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def _check_batch_bounds(self) -> LabSettings:
        if self.default_batch_size > self.max_batch_size:
            raise ValueError(
                f"default_batch_size ({self.default_batch_size}) exceeds "
                f"max_batch_size ({self.max_batch_size})"
            )
        return self
