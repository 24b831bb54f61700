"""
Unified configuration loader with priority resolution.

Root directory (EMBEDPLAYER_ROOT):
- macOS/Linux: ~/.embedplayer
- Windows: %APPDATA%\\embedplayer
- Override: EMBEDPLAYER_ROOT environment variable

Setting priority (highest to lowest), resolved per setting:
1. Environment variables (EMBEDPLAYER_SCREEN_HEIGHT, EMBEDPLAYER_PARENT_HOST,
   EMBEDPLAYER_YOUTUBE_IFRAME_URL)
2. Project config (.embedplayer/config.yaml)
3. User config ({root_dir}/config.yaml)
4. Defaults (config/defaults.py)

Example config.yaml:
    screen_height: 720
    parent_host: example.com
    youtube_iframe_url: https://example.com/iframe/youtube.html
"""

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml

from embedplayer.config.defaults import (
    DEFAULT_PARENT_HOST,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_YOUTUBE_IFRAME_URL,
)

logger = logging.getLogger(__name__)

# setting name -> environment variable
ENV_VARS: dict[str, str] = {
    "screen_height": "EMBEDPLAYER_SCREEN_HEIGHT",
    "parent_host": "EMBEDPLAYER_PARENT_HOST",
    "youtube_iframe_url": "EMBEDPLAYER_YOUTUBE_IFRAME_URL",
}

DEFAULTS: dict[str, Any] = {
    "screen_height": DEFAULT_SCREEN_HEIGHT,
    "parent_host": DEFAULT_PARENT_HOST,
    "youtube_iframe_url": DEFAULT_YOUTUBE_IFRAME_URL,
}


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class EmbedPlayerConfig:
    """Resolved embedplayer configuration.

    ``source`` is the highest-priority layer that supplied any setting.
    """

    screen_height: int = DEFAULT_SCREEN_HEIGHT
    parent_host: str = DEFAULT_PARENT_HOST
    youtube_iframe_url: str = DEFAULT_YOUTUBE_IFRAME_URL
    source: ConfigSource = ConfigSource.DEFAULT

    def __repr__(self) -> str:
        return (
            f"EmbedPlayerConfig(screen_height={self.screen_height!r}, "
            f"parent_host={self.parent_host!r}, "
            f"youtube_iframe_url={self.youtube_iframe_url!r}, "
            f"source={self.source.value!r})"
        )


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _coerce_setting(name: str, value: Any, origin: str) -> Any | None:
    """Validate a raw setting value, returning None if it must be ignored."""
    if name == "screen_height":
        try:
            height = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-integer screen_height {value!r} from {origin}")
            return None
        if height <= 0:
            logger.warning(f"Ignoring non-positive screen_height {height} from {origin}")
            return None
        return height

    if not isinstance(value, str) or not value.strip():
        logger.warning(f"Ignoring empty or non-string {name} from {origin}")
        return None
    value = value.strip()

    if name == "youtube_iframe_url":
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            logger.warning(f"Ignoring non-absolute youtube_iframe_url {value!r} from {origin}")
            return None
    return value


def _settings_from_env() -> dict[str, Any]:
    settings: dict[str, Any] = {}
    for name, env_var in ENV_VARS.items():
        raw = os.environ.get(env_var)
        if raw is None or raw == "":
            continue
        value = _coerce_setting(name, raw, env_var)
        if value is not None:
            settings[name] = value
    return settings


def _settings_from_yaml(config: dict[str, Any] | None, config_path: Path) -> dict[str, Any]:
    if not config:
        return {}
    settings: dict[str, Any] = {}
    for name in DEFAULTS:
        if name not in config:
            continue
        value = _coerce_setting(name, config[name], str(config_path))
        if value is not None:
            settings[name] = value
    return settings


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .embedplayer/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / ".embedplayer" / "config.yaml"
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the embedplayer root directory.

    Priority:
    1. EMBEDPLAYER_ROOT environment variable
    2. Platform-specific default:
       - Windows: %APPDATA%\\embedplayer
       - macOS/Linux: ~/.embedplayer

    Returns:
        Path to the root directory (may not exist).
    """
    env_root = os.environ.get("EMBEDPLAYER_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "embedplayer"
        return Path.home() / "AppData" / "Roaming" / "embedplayer"
    return Path.home() / ".embedplayer"


def _get_user_config_path() -> Path:
    """Get the user-level config path ({root_dir}/config.yaml)."""
    return _get_root_dir() / "config.yaml"


def _resolve_config() -> EmbedPlayerConfig:
    """Resolve configuration from all sources in priority order.

    Each setting is taken from the first layer that defines a valid value:
    environment, project config, user config, then defaults.

    Returns:
        Resolved EmbedPlayerConfig.
    """
    layers: list[tuple[ConfigSource, dict[str, Any]]] = [
        (ConfigSource.ENV, _settings_from_env()),
    ]

    project_config_path = _find_project_config()
    if project_config_path:
        layers.append(
            (
                ConfigSource.PROJECT,
                _settings_from_yaml(
                    _load_yaml_config(project_config_path), project_config_path
                ),
            )
        )

    user_config_path = _get_user_config_path()
    layers.append(
        (
            ConfigSource.USER,
            _settings_from_yaml(_load_yaml_config(user_config_path), user_config_path),
        )
    )

    resolved: dict[str, Any] = {}
    source = ConfigSource.DEFAULT
    for layer_source, settings in layers:
        for name, value in settings.items():
            if name not in resolved:
                resolved[name] = value
        if settings and source is ConfigSource.DEFAULT:
            source = layer_source

    for name, value in DEFAULTS.items():
        resolved.setdefault(name, value)

    logger.debug(f"Resolved embedplayer config from {source.value}: {resolved}")
    return EmbedPlayerConfig(**resolved, source=source)


@lru_cache(maxsize=1)
def get_config() -> EmbedPlayerConfig:
    """Get resolved embedplayer configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().

    Returns:
        EmbedPlayerConfig with screen height, Twitch parent host and
        YouTube iframe URL.
    """
    return _resolve_config()


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if environment variables or config files have changed
    and you need to re-resolve the configuration.
    """
    get_config.cache_clear()
