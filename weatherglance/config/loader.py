"""YAML config loader, credential lookup and dotted-key access."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weatherglance.config.schema import GlanceConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> GlanceConfig:
    """Load and validate config from a YAML file.

    An empty file yields the defaults for every section.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = GlanceConfig(**raw)
    logger.debug("Loaded config from %s", path)
    return config


def load_credential(
    config: GlanceConfig, environ: Mapping[str, str] | None = None
) -> str | None:
    """Read the provider API key from the environment.

    Blank values are treated the same as a missing variable.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(config.credential_env, "")
    if not value.strip():
        logger.warning("%s is not set; weather lookups are disabled", config.credential_env)
        return None
    return value.strip()


def get_config_value(config: GlanceConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.default_city'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, dict) and part in obj:
            obj = obj[part]
        elif part in getattr(type(obj), "model_fields", {}):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
