"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - Hierarchical YAML configuration loading
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access
    - Immutable per-session settings snapshot

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path (repo-level config/config.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://www.saucedemo.com"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


_TRUTHY = ("true", "1", "yes", "on")


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.warning(f"Configuration file not found: {path}. Using defaults and environment only.")
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e
    logger.debug(f"Loaded configuration from: {path}")
    return data


def _coerce(raw: str, default: Any) -> Any:
    """Convert an environment string to the type of `default`."""
    if isinstance(default, bool):
        return raw.lower() in _TRUTHY
    if isinstance(default, (int, float)):
        try:
            return type(default)(raw)
        except ValueError:
            raise ConfigurationError(
                f"Expected {type(default).__name__} for {raw!r}"
            ) from None
    return raw


class ConfigLoader:
    """
    Process-wide view of config/config.yaml with environment overrides.

    A dotted key maps to an upper-cased variable (ui.default_timeout_ms ->
    UI_DEFAULT_TIMEOUT_MS), which wins over the file. The file is read once;
    call reset() to read it again.

    Usage:
        >>> ConfigLoader().get("ui.default_timeout_ms", 5000)
        5000
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._values = _read_yaml(Path(config_path) if config_path else DEFAULT_CONFIG_PATH)
            cls._instance = instance
        return cls._instance

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dotted key: environment first, then YAML, then `default`.

        Raises:
            ConfigurationError: If an environment value does not convert to
                the type of `default`
        """
        raw = os.environ.get(key.upper().replace(".", "_"))
        if raw is not None:
            return _coerce(raw, default)

        node: Any = self._values
        for part in key.split("."):
            node = node.get(part) if isinstance(node, dict) else None
            if node is None:
                return default
        return node

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next one re-reads the file."""
        cls._instance = None


@dataclass(frozen=True)
class SessionSettings:
    """
    Settings snapshot read once at session setup.

    Attributes:
        base_url: Origin that relative navigation targets are joined to
        default_timeout_ms: Wait budget for every primitive without an override
        extended_timeout_ms: Wait budget for asynchronously updated widgets
        poll_interval_ms: Delay between two visibility/text checks
        navigation_timeout_ms: Budget for a page load
        retries: Re-runs of failed tests (runner concern, never used by pages)
        headless: Launch the browser without a window
        browser: Playwright browser type name
    """
    base_url: str = DEFAULT_BASE_URL
    default_timeout_ms: int = 5000
    extended_timeout_ms: int = 10000
    poll_interval_ms: int = 100
    navigation_timeout_ms: int = 30000
    retries: int = 0
    headless: bool = True
    browser: str = "chromium"

    def __post_init__(self) -> None:
        for name in (
            "default_timeout_ms",
            "extended_timeout_ms",
            "poll_interval_ms",
            "navigation_timeout_ms",
        ):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")
        if self.retries < 0:
            raise ConfigurationError(f"retries must not be negative, got {self.retries}")

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "SessionSettings":
        """Build settings from a loader, falling back to field defaults."""
        defaults = cls.__dataclass_fields__
        values = {
            name: config.get(f"ui.{name}", field.default)
            for name, field in defaults.items()
        }
        values["base_url"] = str(values["base_url"]).rstrip("/")
        return cls(**values)


def load_settings(config_path: Optional[Path] = None) -> SessionSettings:
    """
    Read session settings from YAML and the environment.

    Args:
        config_path: Optional explicit YAML path

    Returns:
        Frozen SessionSettings
    """
    settings = SessionSettings.from_config(ConfigLoader(config_path=config_path))
    logger.debug(f"Session settings: {settings}")
    return settings


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "SessionSettings",
    "load_settings",
]
