"""
Module for loading and validating graphmetrics configuration from TOML file.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

# TOML support for different Python versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        raise ImportError(
            "tomli library is required for Python < 3.11. "
            "Install it with: pip install tomli>=2.0.0"
        )

SECTION = "graphmetrics"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "log_level": "info",
    "bfs_workers": 1,
    "eigen_tie_tolerance": 1e-9,
    "eigen_imag_tolerance": 1e-4,
}

LOG_LEVELS = ["debug", "info", "warning", "error"]


class ConfigValidationError(Exception):
    """Exception for configuration validation errors."""

    pass


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Loads and validates configuration from TOML file.

    Args:
        config_path: Path to configuration file.
                    If None, uses graphmetrics/config.toml

    Returns:
        Dictionary with validated configuration

    Raises:
        ConfigValidationError: On validation errors
        FileNotFoundError: If configuration file not found
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent / "config.toml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Failed to parse TOML file: {e}")

    if SECTION in config:
        _validate_engine_section(config[SECTION])

    return config


def get_engine_settings(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Returns the [graphmetrics] section merged over the defaults.

    Args:
        config: Full configuration dictionary (or None for defaults)

    Returns:
        Dictionary with every engine setting present

    Raises:
        ConfigValidationError: If a provided setting is invalid
    """
    section = (config or {}).get(SECTION, {})
    settings = dict(DEFAULT_SETTINGS)
    settings.update(section)
    _validate_engine_section(settings)
    return settings


def _validate_engine_section(section: Dict[str, Any]) -> None:
    """Validates the [graphmetrics] section; every field is optional."""
    optional_fields = {
        "log_level": str,
        "bfs_workers": int,
        "eigen_tie_tolerance": (int, float),
        "eigen_imag_tolerance": (int, float),
    }

    _validate_field_types(section, optional_fields, SECTION)

    if "log_level" in section and section["log_level"] not in LOG_LEVELS:
        raise ConfigValidationError(
            f"{SECTION}.log_level must be one of: {', '.join(LOG_LEVELS)}"
        )

    if "bfs_workers" in section and section["bfs_workers"] < 1:
        raise ConfigValidationError(f"{SECTION}.bfs_workers must be at least 1")

    for name in ("eigen_tie_tolerance", "eigen_imag_tolerance"):
        if name in section and section[name] < 0:
            raise ConfigValidationError(f"{SECTION}.{name} must be non-negative")


def _validate_field_types(
    section: Dict[str, Any], fields: Dict[str, Any], section_name: str
) -> None:
    """Checks types of the fields present in a section."""
    for field_name, expected_type in fields.items():
        if field_name not in section:
            continue

        actual_value = section[field_name]
        # bool is a subclass of int, but true/false is never a valid number here
        if isinstance(actual_value, bool) or not isinstance(actual_value, expected_type):
            type_name = (
                expected_type.__name__
                if isinstance(expected_type, type)
                else " or ".join(t.__name__ for t in expected_type)
            )
            raise ConfigValidationError(
                f"Field {section_name}.{field_name} must be {type_name}, "
                f"got {type(actual_value).__name__}"
            )
