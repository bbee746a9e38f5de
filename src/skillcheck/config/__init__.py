"""Configuration loading and normalization for skillcheck runs."""

from __future__ import annotations

from skillcheck.config.loader import load_config
from skillcheck.config.model import SkillcheckConfig

__all__ = ["SkillcheckConfig", "load_config"]
