"""Process settings for contextforge.

Settings are resolved from an optional YAML file and then from environment
variables. They only provide defaults: a context class that declares its own
``adapter_class`` never consults them.
"""

from __future__ import annotations

import importlib
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from contextforge.errors import ConfigurationError

if TYPE_CHECKING:
    from contextforge.adapters.base import BaseAdapter

logger = logging.getLogger(__name__)

ENV_PREFIX = "CONTEXTFORGE_"


def import_string(path: str) -> Any:
    """Import an attribute from ``package.module:attr`` or ``package.module.attr``.

    Raises:
        ConfigurationError: If the module or attribute cannot be found
    """
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ConfigurationError(f"Invalid import path: {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import module '{module_name}': {e}") from e

    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise ConfigurationError(
            f"Module '{module_name}' has no attribute '{attr}'"
        ) from e


@dataclass
class Settings:
    """Resolved contextforge settings.

    Attributes:
        orm: Import path of the default model adapter class, used by contexts
            that declare no adapter of their own
        log_level: Level applied to the ``contextforge`` logger
    """

    orm: str | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, base: Settings | None = None) -> Settings:
        """Create settings from environment variables.

        Reads CONTEXTFORGE_ORM and CONTEXTFORGE_LOG_LEVEL. Values not present
        in the environment are taken from ``base`` (or the defaults).
        """
        values = asdict(base) if base else asdict(cls())
        for f in fields(cls):
            env_value = os.environ.get(f"{ENV_PREFIX}{f.name.upper()}")
            if env_value:
                values[f.name] = env_value
        return cls(**values)

    @classmethod
    def from_file(cls, path: Path) -> Settings:
        """Create settings from a YAML file.

        Raises:
            ConfigurationError: If the file is not a mapping or has unknown keys
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"{path}: settings file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"{path}: unknown setting(s): {', '.join(unknown)}"
            )
        return cls(**data)

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Resolve settings: YAML file first, environment variables override."""
        base = cls.from_file(path) if path else None
        return cls.from_env(base)

    def adapter(self) -> type[BaseAdapter]:
        """Resolve the configured default adapter class.

        Raises:
            ConfigurationError: If no ORM adapter is configured
        """
        if not self.orm:
            raise ConfigurationError(
                "No model adapter configured. Set adapter_class on the context, "
                "pass adapter= when constructing it, or configure(orm=...)."
            )
        return import_string(self.orm)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def configure(settings: Settings | None = None, **overrides: Any) -> Settings:
    """Install process settings.

    Usage:
        configure(orm="myapp.adapters:SQLAdapter", log_level="DEBUG")
    """
    global _settings
    base = settings or get_settings()
    values = asdict(base)
    values.update(overrides)
    _settings = Settings(**values)

    logging.getLogger("contextforge").setLevel(_settings.log_level.upper())
    logger.debug("contextforge configured: %s", _settings)
    return _settings


def reset_settings() -> None:
    """Drop the cached settings. Primarily for testing."""
    global _settings
    _settings = None
