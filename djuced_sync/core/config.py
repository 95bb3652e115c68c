"""
Configuration management for djuced-sync.

This module provides centralized configuration loading and access,
supporting YAML files and environment variable overrides.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T")

# DJUCED numbers its own cues from here up
SYSTEM_CUE_START = 1000
DEFAULT_SYSTEM_CUE_THRESHOLD = SYSTEM_CUE_START
DEFAULT_COMMENT_FORMAT = "(*) {key} - Energy {energy}"
DEFAULT_CUE_NAME_FORMAT = "Cue {index}"


class ConfigurationManager:
    """
    Centralized configuration management for djuced-sync.

    Loads configuration from a YAML file, applies environment variable
    overrides, and provides dot-path access to values.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config YAML file (defaults to config.yml in project root)
        """
        self.config_path = config_path or self._find_config_file()
        self._base_config: Dict[str, Any] = {}  # As read from file
        self._config: Dict[str, Any] = {}  # With overrides applied
        self._load_config()

    def _find_config_file(self) -> str:
        """Find config.yml in the working directory or above the package."""
        cwd_config = Path.cwd() / "config.yml"
        if cwd_config.exists():
            return str(cwd_config)

        current_dir = Path(__file__).parent
        for _ in range(3):
            config_file = current_dir / "config.yml"
            if config_file.exists():
                return str(config_file)
            current_dir = current_dir.parent

        return "config.yml"

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                self._base_config = yaml.safe_load(f) or {}

            self._config = copy.deepcopy(self._base_config)

            if self._base_config.get("environment_overrides", {}).get("enabled"):
                self._apply_env_overrides()

            logger.info(f"✅ Loaded configuration from {self.config_path}")

        except FileNotFoundError:
            logger.warning(
                f"⚠️  Config file not found: {self.config_path}. Using defaults."
            )
            self._base_config = {}
            self._config = {}
        except yaml.YAMLError as e:
            logger.error(f"❌ Error parsing config YAML: {e}. Using defaults.")
            self._base_config = {}
            self._config = {}

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        env_config = self._base_config.get("environment_overrides", {})
        prefix = env_config.get("prefix", "DJS_")
        mappings = env_config.get("mappings", {}) or {}

        overrides_applied = 0
        for config_path, env_suffix in mappings.items():
            env_var = f"{prefix}{env_suffix}"
            env_value = os.getenv(env_var)

            if env_value is not None:
                converted_value = self._convert_env_value(env_value)
                self._set_nested_value(config_path, converted_value)
                overrides_applied += 1
                logger.info(
                    f"🔧 Environment override: {config_path} = {converted_value}"
                )

        if overrides_applied:
            logger.info(f"✅ Applied {overrides_applied} environment overrides")

    def _convert_env_value(self, value: str) -> Union[str, int, float, bool]:
        """Convert environment variable string to appropriate type."""
        if value.lower() in ("true", "yes", "on"):
            return True
        elif value.lower() in ("false", "no", "off"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

    def _set_nested_value(self, path: str, value: Any) -> None:
        """Set a nested configuration value using dot notation."""
        keys = path.split(".")
        current = self._config

        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def get(
        self, path: str, default: Any = None, type_hint: Optional[Type[T]] = None
    ) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., 'sync.system_cue_threshold')
            default: Default value if path doesn't exist
            type_hint: Optional type hint for return value

        Returns:
            Configuration value with optional type casting
        """
        keys = path.split(".")
        current: Any = self._config

        try:
            for key in keys:
                current = current[key]

            if current is None:
                return default

            if type_hint:
                try:
                    if type_hint == bool:
                        return bool(current)
                    elif type_hint == int:
                        return int(current)  # type: ignore[call-overload]
                    elif type_hint == float:
                        return float(current)  # type: ignore[arg-type]
                    elif type_hint == str:
                        return str(current)
                except (ValueError, TypeError):
                    pass

            return current

        except (KeyError, TypeError):
            return default

    # Convenience properties for common configuration paths

    @property
    def source_path(self) -> Optional[str]:
        """Explicit Mixed In Key database path, if configured."""
        return self.get("source.path", None, str)

    @property
    def source_filename(self) -> str:
        return self.get("source.filename", "Collection11.mikdb", str)

    @property
    def destination_path(self) -> Optional[str]:
        """Explicit DJUCED database path, if configured."""
        return self.get("destination.path", None, str)

    @property
    def system_cue_threshold(self) -> int:
        """
        Cue number below which DJUCED cues are replaced on sync.

        Values above SYSTEM_CUE_START would delete DJUCED's own cues, so they
        are capped there.
        """
        threshold = self.get(
            "sync.system_cue_threshold", DEFAULT_SYSTEM_CUE_THRESHOLD, int
        )
        if threshold > SYSTEM_CUE_START:
            logger.warning(
                f"⚠️  sync.system_cue_threshold {threshold} is above "
                f"{SYSTEM_CUE_START}; using {SYSTEM_CUE_START}"
            )
            return SYSTEM_CUE_START
        return threshold

    @property
    def sync_settings(self) -> Dict[str, Any]:
        """Get settings used by the sync orchestrator."""
        return {
            "system_cue_threshold": self.system_cue_threshold,
            "tempo_round_threshold": self.get(
                "sync.tempo_round_threshold", 0.03, float
            ),
            "comment_format": self.get(
                "sync.comment_format", DEFAULT_COMMENT_FORMAT, str
            ),
            "cue_name_format": self.get(
                "sync.cue_name_format", DEFAULT_CUE_NAME_FORMAT, str
            ),
        }

    @property
    def logging_settings(self) -> Dict[str, Any]:
        return {
            "level": self.get("logging.level", "INFO", str),
            "file": self.get("logging.file", None, str),
        }


_config_instance: Optional[ConfigurationManager] = None


def get_config(config_path: Optional[str] = None) -> ConfigurationManager:
    """
    Get the global configuration instance, creating it on first use.

    Args:
        config_path: Path to config file (only used on first call)

    Returns:
        ConfigurationManager instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = ConfigurationManager(config_path)
    return _config_instance


def reset_config() -> None:
    """
    Reset the global configuration instance.

    This is primarily intended for unit tests to ensure clean state.
    """
    global _config_instance
    _config_instance = None
