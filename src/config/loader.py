from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from config.models import DEFAULT_ROOT_DIR, ConsoleSettings
from logging_utils.logger import get_logger

logger = get_logger(__name__)

PROJECT_CONFIG_NAME = "cross.yaml"

# Environment variable -> settings key
_ENV_KEYS = {
    "CROSS_COLOR": "color",
    "CROSS_VERBOSE": "verbose",
    "CROSS_QUIET": "quiet",
}


def _parse_env_file(path: Path) -> dict[str, str]:
    """Parse .env file into dictionary."""
    data: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        data[key.strip()] = value.strip().strip("'").strip('"')
    return data


def _parse_yaml_file(path: Path) -> dict[str, Any]:
    """Parse YAML file into dictionary."""
    if not path.exists():
        return {}
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    loaded = yaml.safe_load(text)
    return loaded if isinstance(loaded, dict) else {}


def _from_env_mapping(env: dict[str, str]) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for env_key, setting in _ENV_KEYS.items():
        value = env.get(env_key)
        if value is not None and value != "":
            payload[setting] = value
    return payload


def load_settings(config_path: Path | None = None) -> ConsoleSettings:
    """Load console settings from multiple sources with proper precedence.

    Loading order (later overrides earlier):
    1. Global config: ~/.cross/config.yaml
    2. Project config: cross.yaml
    3. Environment variables: CROSS_COLOR, CROSS_VERBOSE, CROSS_QUIET
    4. Explicit config file: config_path parameter

    Args:
        config_path: Optional path to explicit config file (YAML or .env)

    Returns:
        ConsoleSettings instance with merged configuration
    """
    payload: dict[str, Any] = {}

    global_config = DEFAULT_ROOT_DIR / "config.yaml"
    if global_config.exists():
        logger.debug("Loading global config from %s", global_config)
        payload.update(_parse_yaml_file(global_config))

    project_config = Path(PROJECT_CONFIG_NAME)
    if project_config.exists():
        logger.debug("Loading project config from %s", project_config)
        payload.update(_parse_yaml_file(project_config))

    payload.update(_from_env_mapping(dict(os.environ)))

    if config_path:
        config_path = config_path.expanduser()
        logger.debug("Loading config file %s", config_path)
        if config_path.suffix.lower() in {".yaml", ".yml"}:
            payload.update(_parse_yaml_file(config_path))
        else:
            env_payload = _parse_env_file(config_path)
            payload.update(_from_env_mapping(env_payload))

    # YAML may give a bare `color:` key; treat it as unset.
    if "color" in payload and payload["color"] is not None:
        payload["color"] = str(payload["color"])

    return ConsoleSettings(**payload)


def load_settings_from_cli(
    config_file: Path | None,
    *,
    verbose: bool = False,
    quiet: bool = False,
    color: str | None = None,
) -> ConsoleSettings:
    """CLI entry point for loading settings; set flags override loaded values.

    A single verbosity flag on the command line replaces whatever verbosity the
    files or environment asked for; only both flags together conflict.
    """
    settings = load_settings(Path(config_file).expanduser()) if config_file else load_settings()
    overrides: dict[str, Any] = {}
    if verbose or quiet:
        overrides["verbose"] = verbose
        overrides["quiet"] = quiet
    if color is not None:
        overrides["color"] = color
    if overrides:
        settings = ConsoleSettings.model_validate({**settings.model_dump(), **overrides})
    return settings
