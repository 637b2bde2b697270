"""Settings loading for the updater.

Values are layered, later layers winning:
defaults < YAML settings file < environment < explicit overrides (CLI).
"""

from pathlib import Path
from typing import Any, Dict, Optional
import yaml
import structlog
from pydantic import ValidationError
from common import ConfigurationError, get_env
from schemas import UpdaterConfig

logger = structlog.get_logger()

# Environment variable -> config field
ENV_OVERRIDES = {
    "AEIGO_INPUT_HOSTS": "input_path",
    "AEIGO_OUTPUT_HOSTS": "output_path",
    "AEIGO_SENTINEL": "sentinel_address",
    "HTTP_TIMEOUT": "timeout",
}


def read_yaml_settings(config_path: str) -> Dict[str, Any]:
    """
    Read the ``updater`` section of a YAML settings file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Mapping of config field names to values

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(
            "Configuration file not found", context={"config_path": config_path}
        )

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            "Cannot load configuration file",
            context={"config_path": config_path},
            original_error=e,
        ) from e

    section = (data.get("updater") or {}) if isinstance(data, dict) else None
    if not isinstance(section, dict):
        raise ConfigurationError(
            "'updater' section must be a mapping",
            context={"config_path": config_path, "field": "updater"},
        )

    logger.info("Configuration loaded", config_path=config_path, keys=sorted(section))
    return section


def _env_settings() -> Dict[str, Any]:
    settings = {}
    for key, field in ENV_OVERRIDES.items():
        value = get_env(key)
        if value:
            settings[field] = value
    return settings


def load_settings(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> UpdaterConfig:
    """
    Build the updater configuration.

    Args:
        config_path: Optional YAML settings file
        overrides: Explicit values (e.g. from the command line); None values
            are ignored

    Returns:
        Validated UpdaterConfig

    Raises:
        ConfigurationError: If any layer holds an invalid value
    """
    settings: Dict[str, Any] = {}

    if config_path:
        settings.update(read_yaml_settings(config_path))

    settings.update(_env_settings())
    settings.update({k: v for k, v in (overrides or {}).items() if v is not None})

    try:
        return UpdaterConfig(**settings)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            context={"fields": ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])},
            original_error=e,
        ) from e
