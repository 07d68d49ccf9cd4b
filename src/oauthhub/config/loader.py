"""Configuration loader.

Loads provider registrations from a YAML file, resolving `${VAR_NAME}`
references against the environment so secrets never live in the file.
"""

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import OAuthConfigModel

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "OAUTHHUB_CONFIG"
ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z0-9_]+)\}")


def _default_candidates() -> list[Path]:
    return [Path.cwd() / "oauthhub.yml", Path.home() / ".oauthhub" / "config.yml"]


def resolve_env_references(value: Any) -> Any:
    """Recursively replace `${VAR}` references in strings with environment values.

    Raises:
        ConfigurationError: A referenced variable is not set.
    """
    if isinstance(value, str):

        def _replace(match: re.Match[str]) -> str:
            var_name = match.group(1)
            resolved = os.environ.get(var_name)
            if resolved is None:
                raise ConfigurationError(f"Environment variable not found: {var_name}")
            return resolved

        return ENV_VAR_PATTERN.sub(_replace, value)
    if isinstance(value, list):
        return [resolve_env_references(item) for item in value]
    if isinstance(value, dict):
        return {key: resolve_env_references(item) for key, item in value.items()}
    return value


def config_from_dict(data: Mapping[str, Any] | None) -> OAuthConfigModel:
    """Validate an already-parsed `oauth` section.

    Raises:
        ConfigurationError: The section does not match the schema.
    """
    try:
        return OAuthConfigModel.model_validate(resolve_env_references(dict(data or {})))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid oauth config: {e}") from e


def load_config(config_path: Path | str | None = None) -> OAuthConfigModel:
    """Load oauth configuration from a YAML file.

    Args:
        config_path: Optional path to the config file.
                    If not provided, looks for:
                    1. OAUTHHUB_CONFIG environment variable
                    2. ./oauthhub.yml
                    3. ~/.oauthhub/config.yml

    Returns:
        OAuthConfigModel, empty when no file is found.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    path: Path | None = Path(config_path) if config_path is not None else None
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
        else:
            path = next((c for c in _default_candidates() if c.exists()), None)
            if path is None:
                logger.info("No oauth config file found, using empty configuration")
                return OAuthConfigModel()

    if not path.exists():
        raise ConfigurationError(f"OAuth config file not found at {path}")

    logger.debug(f"Loading oauth config from: {path}")
    try:
        with open(path) as f:
            raw_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to parse YAML config file {path}: {e}") from e

    if not raw_config:
        logger.info("Empty oauth config file, using empty configuration")
        return OAuthConfigModel()
    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"OAuth config file {path} must contain a mapping")

    return config_from_dict(raw_config.get("oauth") or {})
