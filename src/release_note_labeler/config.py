"""Configuration management for release-note-labeler using YAML files."""

import os
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger()

CONFIG_DIR_NAME = ".release-note-labeler"

# Every key the tool reads, with the environment variable consulted when the
# key is not set in any config file.
ENV_FALLBACKS = {
    "github.token": "GITHUB_TOKEN",
    "github.base_url": "GITHUB_API_URL",
}
KNOWN_KEYS = tuple(ENV_FALLBACKS)


def validate_key(key: str) -> None:
    """Reject keys the tool never reads."""
    if key not in ENV_FALLBACKS:
        raise ValueError(f"Unknown config key '{key}', expected one of: {', '.join(KNOWN_KEYS)}")


def validate_setting(key: str, value: str) -> None:
    """Reject unknown keys and values the GitHub client cannot use."""
    validate_key(key)
    if not value:
        raise ValueError(f"Empty value for '{key}', use 'rnl config unset {key}' instead")
    if key == "github.base_url" and not value.startswith(("https://", "http://")):
        raise ValueError(f"github.base_url must be an http(s) URL, got '{value}'")


class Config:
    """Configuration manager using YAML file storage.

    Local config lives in .release-note-labeler/config.yaml in the current
    directory, global config in ~/.release-note-labeler/config.yaml. Reads
    look in local config first, then global config, then the environment.
    """

    def __init__(self, use_global: bool = False, config_dir: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            use_global: If True, use global config only. If False, use local config with global fallback.
            config_dir: Custom directory to store config file (overrides use_global)
        """
        if config_dir is not None:
            self.config_dir = Path(config_dir)
            self.is_global = use_global
        elif use_global:
            self.config_dir = Path.home() / CONFIG_DIR_NAME
            self.is_global = True
        else:
            self.config_dir = Path.cwd() / CONFIG_DIR_NAME
            self.is_global = False

        self.config_file = self.config_dir / "config.yaml"
        self._config: dict[str, Any] = self._load(self.config_file)

        self._global_config: dict[str, Any] = {}
        if not self.is_global:
            global_config_file = Path.home() / CONFIG_DIR_NAME / "config.yaml"
            if global_config_file != self.config_file and global_config_file.exists():
                try:
                    self._global_config = self._load(global_config_file)
                except ValueError as e:
                    logger.warning("Failed to load global config", error=str(e))

        logger.debug("Config initialized", config_file=str(self.config_file), is_global=self.is_global)

    @staticmethod
    def _load(config_file: Path) -> dict[str, Any]:
        """Load configuration from a YAML file, empty if it does not exist."""
        if not config_file.exists():
            logger.debug("Config file does not exist, initializing empty config", config_file=str(config_file))
            return {}

        try:
            with open(config_file, "r") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config", error=str(e))
            raise ValueError(f"Failed to load config from {config_file}: {e}") from e
        logger.debug("Config loaded successfully", keys=list(config.keys()))
        return config

    def _save(self) -> None:
        """Save configuration to YAML file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                yaml.safe_dump(self._config, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logger.error("Failed to save config", error=str(e))
            raise ValueError(f"Failed to save config to {self.config_file}: {e}") from e
        logger.debug("Config saved successfully")

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if key is not set anywhere

        Returns:
            Configuration value or default
        """
        value, source = self._lookup(key)
        if source is None:
            logger.debug("Config value not found", key=key)
            return default
        logger.debug("Getting config value", key=key, source=source)
        return value

    def source(self, key: str) -> str | None:
        """Name where the value of ``key`` comes from, None if it is not set."""
        return self._lookup(key)[1]

    def _lookup(self, key: str) -> tuple[str | None, str | None]:
        if key in self._config:
            return self._config[key], "global" if self.is_global else "local"

        if not self.is_global and key in self._global_config:
            return self._global_config[key], "global"

        env_var = ENV_FALLBACKS.get(key)
        if env_var and os.environ.get(env_var):
            return os.environ[env_var], f"environment {env_var}"

        return None, None

    def set(self, key: str, value: str) -> None:
        """Set a configuration value.

        Raises:
            ValueError: If the key is unknown or the value unusable
        """
        validate_setting(key, value)
        logger.debug("Setting config value", key=key)
        self._config[key] = value
        self._save()

    def unset(self, key: str) -> None:
        """Remove a configuration value."""
        logger.debug("Unsetting config value", key=key)
        if key in self._config:
            del self._config[key]
            self._save()

    def list(self) -> dict[str, str]:
        """List all configuration settings, local values taking precedence over global ones."""
        if self.is_global:
            return self._config.copy()
        merged = self._global_config.copy()
        merged.update(self._config)
        return merged


def get_config(use_global: bool = False) -> Config:
    """Get a configuration instance.

    Args:
        use_global: If True, return global config. If False, return local config with global fallback.
    """
    return Config(use_global=use_global)
