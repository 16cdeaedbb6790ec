"""Configuration for SGI Cidade.

This package contains configuration modules for the lighting core:
- lighting_config: Tunables with environment overrides
- seed_data: Defaults for persisted keys and the gazetteer
"""

from sgi.config.lighting_config import (
    DAMAGED_POLE,
    DEFAULT_LIGHTING_CONFIG,
    PROBLEM_TYPES,
    LightingConfig,
    normalize_problem_type,
)
from sgi.config.seed_data import (
    GAZETTEER,
    seed_notifications,
    seed_requests,
    seed_users,
)

__all__ = [
    "DAMAGED_POLE",
    "DEFAULT_LIGHTING_CONFIG",
    "GAZETTEER",
    "LightingConfig",
    "PROBLEM_TYPES",
    "normalize_problem_type",
    "seed_notifications",
    "seed_requests",
    "seed_users",
]
