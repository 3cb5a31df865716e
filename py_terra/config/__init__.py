"""
Configuration for world generation and runtime settings.
"""

from .settings import Settings, settings
from .world_config import (
    GeographyConfig,
    IcecapsConfig,
    IslandsConfig,
    PhasesConfig,
    SeedsConfig,
    WatermaskConfig,
    WorldConfig,
    default_config,
    merge_config,
    resolve_config,
)

__all__ = [
    'Settings', 'settings',
    'WorldConfig', 'WatermaskConfig', 'SeedsConfig', 'GeographyConfig',
    'IslandsConfig', 'IcecapsConfig', 'PhasesConfig',
    'default_config', 'merge_config', 'resolve_config',
]
