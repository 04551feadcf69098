"""Run configuration: settings value and YAML settings loader."""

from .settings import ValidatorSettings
from .settings_loader import (
    SETTINGS_SCHEMA,
    build_settings,
    find_settings_file,
    load_settings,
    load_settings_file,
)

__all__ = [
    "SETTINGS_SCHEMA",
    "ValidatorSettings",
    "build_settings",
    "find_settings_file",
    "load_settings",
    "load_settings_file",
]
