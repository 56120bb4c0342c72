"""Configuration management using TOML + environment variables."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

import tomli_w

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".histscope"
CONFIG_FILE = CONFIG_DIR / "config.toml"
LOG_FILE = CONFIG_DIR / "histscope.log"

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_HIGHLIGHTER = "bat --color=always --style=plain --paging=never --language=bash"


@dataclass
class DisplayConfig:
    date_format: str = DEFAULT_DATE_FORMAT
    highlighter: str = DEFAULT_HIGHLIGHTER
    highlight_timeout: int = 5


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: str = "~/.histscope/histscope.log"


@dataclass
class AppConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def ensure_config_dir() -> None:
    """Create config directory."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", name, raw)
        return default


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring [%s] in %s: expected a table, got %r", name, CONFIG_FILE, section)
        return {}
    return section


def _typed(section: dict[str, Any], key: str, default: Any) -> Any:
    """Value of ``key`` if it has the same type as ``default``, else ``default``."""
    if key not in section:
        return default
    value = section[key]
    # bool is an int subclass, but `true` is not a timeout
    if type(value) is not type(default):
        logger.warning("Ignoring %s=%r in %s: expected %s", key, value, CONFIG_FILE, type(default).__name__)
        return default
    return value


def load_config() -> AppConfig:
    """Load configuration from TOML file with env var overrides."""
    config = AppConfig()

    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not read %s, using defaults: %s", CONFIG_FILE, e)
            data = {}

        display = _section(data, "display")
        config.display.date_format = _typed(display, "date_format", config.display.date_format)
        config.display.highlighter = _typed(display, "highlighter", config.display.highlighter)
        config.display.highlight_timeout = _typed(display, "highlight_timeout", config.display.highlight_timeout)

        logging_cfg = _section(data, "logging")
        config.logging.level = _typed(logging_cfg, "level", config.logging.level)
        config.logging.file = _typed(logging_cfg, "file", config.logging.file)

    # Environment variable overrides
    if env_date_format := os.environ.get("HISTSCOPE_DATE_FORMAT"):
        config.display.date_format = env_date_format
    # An empty HISTSCOPE_HIGHLIGHTER disables highlighting
    if (env_highlighter := os.environ.get("HISTSCOPE_HIGHLIGHTER")) is not None:
        config.display.highlighter = env_highlighter
    config.display.highlight_timeout = _env_int("HISTSCOPE_HIGHLIGHT_TIMEOUT", config.display.highlight_timeout)
    if env_log_level := os.environ.get("HISTSCOPE_LOG_LEVEL"):
        config.logging.level = env_log_level

    return config


def save_config(config: AppConfig) -> None:
    """Save configuration to TOML file."""
    ensure_config_dir()

    data = {
        "display": {
            "date_format": config.display.date_format,
            "highlighter": config.display.highlighter,
            "highlight_timeout": config.display.highlight_timeout,
        },
        "logging": {
            "level": config.logging.level,
            "file": config.logging.file,
        },
    }

    with open(CONFIG_FILE, "wb") as f:
        tomli_w.dump(data, f)


def set_config_value(config: AppConfig, key: str, value: str) -> object:
    """Set ``section.key`` from its string form; raises ``ValueError`` on bad input."""
    section_name, _, attr = key.partition(".")
    section = {"display": config.display, "logging": config.logging}.get(section_name)
    if section is None or not attr or not hasattr(section, attr):
        raise ValueError(f"Unknown key: {key}")

    typed_value: object = value
    if isinstance(getattr(section, attr), int):
        try:
            typed_value = int(value)
        except ValueError:
            raise ValueError(f"{key} expects an integer, got {value!r}") from None
    setattr(section, attr, typed_value)
    return typed_value


# Global singleton
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or load the global config singleton."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global config (for testing)."""
    global _config
    _config = None
