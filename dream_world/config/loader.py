"""Configuration loading — reads a TransformConfig from a JSON file."""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from dream_world.models.config import TransformConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded."""
    pass


def load_config(path: Union[str, Path]) -> TransformConfig:
    """
    Load a configuration file.

    Keys left out of the file keep their defaults, so a file holding only
    ``{"vocabulary": {"places": [...]}}`` replaces just the place list.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    try:
        config = TransformConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    logger.info("Loaded transform config from %s", path)
    return config
