"""Settings loader.

Reads the optional YAML settings file of a registry checkout and merges
it with command line options into ValidatorSettings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

import voluptuous as vol
import yaml

from ..const import SETTINGS_FILENAME
from ..domain.exceptions import ConfigError
from ..domain.value_objects import ValidateTarget
from .settings import ValidatorSettings

_LOGGER = logging.getLogger(__name__)

SETTINGS_SCHEMA = vol.Schema(
    {
        vol.Optional("targets"): vol.All(
            [vol.Coerce(ValidateTarget)], vol.Length(min=1)
        ),
        vol.Optional("stop_on_error", default=False): bool,
        vol.Optional("additional_chain_types", default=[]): [
            vol.All(str, vol.Length(min=1))
        ],
    }
)


def find_settings_file(
    repo_dir: Path | str, config_path: Optional[Path | str] = None
) -> Optional[Path]:
    """Locate the settings file to use.

    Args:
        repo_dir: Root of the registry checkout
        config_path: Explicit settings file, which must exist

    Returns:
        Path of the settings file, or None when there is none

    Raises:
        ConfigError: If an explicit settings file does not exist
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Settings file not found: {path}")
        return path

    default_path = Path(repo_dir) / SETTINGS_FILENAME
    if default_path.is_file():
        return default_path
    return None


def load_settings_file(path: Path) -> dict[str, Any]:
    """Load and validate a YAML settings file.

    An empty file is the same as no settings.

    Raises:
        ConfigError: If the file is unreadable, not YAML, or does not
            match the settings schema
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as err:
        raise ConfigError(f"Failed to read settings file {path}: {err}") from err
    except yaml.YAMLError as err:
        raise ConfigError(f"Invalid YAML in {path}: {err}") from err

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")

    try:
        return SETTINGS_SCHEMA(data)
    except vol.Invalid as err:
        raise ConfigError(f"Invalid settings in {path}: {err}") from err


def build_settings(
    file_data: Optional[dict[str, Any]] = None,
    targets: Optional[Iterable[ValidateTarget]] = None,
    stop_on_error: bool = False,
    additional_chain_types: Iterable[str] = (),
) -> ValidatorSettings:
    """Merge settings file values with command line options.

    Tiers given on the command line replace the file's ``targets``,
    ``stop_on_error`` can only be switched on, and extra chain types are
    appended to the file's list.

    Example:
        >>> build_settings({"additional_chain_types": ["A"]}, additional_chain_types=["B"])
        ValidatorSettings(targets=(...), stop_on_error=False, additional_chain_types=('A', 'B'))
    """
    file_data = file_data or {}

    selected = list(targets or ()) or list(file_data.get("targets", ()))
    if selected:
        # Groups always run in registry order
        resolved = tuple(target for target in ValidateTarget if target in selected)
    else:
        resolved = tuple(ValidateTarget)

    chain_types = list(file_data.get("additional_chain_types", ()))
    for chain_type in additional_chain_types:
        if chain_type not in chain_types:
            chain_types.append(chain_type)

    return ValidatorSettings(
        targets=resolved,
        stop_on_error=stop_on_error or bool(file_data.get("stop_on_error", False)),
        additional_chain_types=tuple(chain_types),
    )


def load_settings(
    repo_dir: Path | str,
    config_path: Optional[Path | str] = None,
    targets: Optional[Iterable[ValidateTarget]] = None,
    stop_on_error: bool = False,
    additional_chain_types: Iterable[str] = (),
) -> ValidatorSettings:
    """Build the effective settings of a run.

    Args:
        repo_dir: Root of the registry checkout
        config_path: Explicit settings file (default: the checkout's own)
        targets: Tiers selected on the command line
        stop_on_error: Stop-on-error flag from the command line
        additional_chain_types: Extra chain types from the command line

    Returns:
        Effective ValidatorSettings

    Raises:
        ConfigError: If the settings file is missing, unreadable or invalid
    """
    path = find_settings_file(repo_dir, config_path)
    file_data: dict[str, Any] = {}
    if path is not None:
        file_data = load_settings_file(path)
        _LOGGER.info("Loaded settings from %s", path)
    else:
        _LOGGER.debug("No settings file found in %s, using defaults", repo_dir)

    settings = build_settings(file_data, targets, stop_on_error, additional_chain_types)
    _LOGGER.debug("Effective settings: %s", settings)
    return settings
