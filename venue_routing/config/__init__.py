"""
Configuration management for venue pedestrian routing.
"""

from .routing_config import PRESET_ENV_VAR, PRESETS, RoutingConfig

__all__ = [
    'PRESET_ENV_VAR',
    'PRESETS',
    'RoutingConfig'
]
