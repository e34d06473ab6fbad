"""Configuration module using Pydantic Settings.

Provides typed configuration for lab sessions with environment variable support.

Usage:
    from prototypelab.config import LabSettings

    settings = LabSettings(hero_name="Knight")
"""

from prototypelab.config.settings import LabSettings

__all__ = [
    "LabSettings",
]
