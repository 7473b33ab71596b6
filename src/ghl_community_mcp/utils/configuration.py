import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from ..core.errors import ConfigurationError, ConfigurationMissingError
from .config_types import MCPSettings, Settings

logger = logging.getLogger(__name__)

# Unprefixed names shared with other GoHighLevel tooling
DIRECT_ENV_VARS = {
    "GHL_TOKEN": "ghl_token",
    "GHL_LOCATION_ID": "ghl_location_id",
    "GHL_GROUP_ID": "ghl_group_id",
}


def _deep_merge(source: Dict[str, Any], destination: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deeply merge two dictionaries. `source` is merged into `destination`.
    """
    for key, value in source.items():
        if (
            isinstance(value, dict)
            and key in destination
            and isinstance(destination[key], dict)
        ):
            destination[key] = _deep_merge(value, destination[key])
        else:
            destination[key] = value
    return destination


class ConfigurationManager:
    """
    Builds the immutable ``Settings`` value from its sources.

    Precedence, lowest first:
    1. Default values from the Pydantic Settings model.
    2. Values from a YAML configuration file (ghl-community-mcp.yaml).
    3. Values from environment variables (including a .env file).
    """

    DEFAULT_CONFIG_FILES = ["ghl-community-mcp.yaml", "ghl-community-mcp.yml"]
    ENV_PREFIX = "GHL_COMMUNITY_"

    def __init__(
        self,
        config_file_path: Optional[Union[str, Path]] = None,
        env_prefix: str = ENV_PREFIX,
        dotenv_path: Optional[Union[str, Path]] = None,
        load_dotenv_flag: bool = True,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the ConfigurationManager.

        Args:
            config_file_path: Optional path to a specific configuration file.
                              If None, the working directory is searched.
            env_prefix: Prefix for environment variables other than the GHL_* ones.
            dotenv_path: Optional path to a .env file to load.
            load_dotenv_flag: If True, load a .env file on initialization.
            environ: Environment mapping to read; defaults to ``os.environ``.
        """
        self.env_prefix = env_prefix
        self.dotenv_path = dotenv_path
        self._environ = environ
        self._config_file_path = self._resolve_config_file_path(config_file_path)

        if load_dotenv_flag and environ is None:
            self._load_dotenv()

    @property
    def config_file_path(self) -> Optional[Path]:
        return self._config_file_path

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def _load_dotenv(self) -> None:
        """Load a .env file without overriding variables already set."""
        dotenv_path = self.dotenv_path
        if dotenv_path is None:
            candidate = Path.cwd() / ".env"
            if candidate.is_file():
                dotenv_path = candidate
        if dotenv_path and Path(dotenv_path).is_file():
            load_dotenv(dotenv_path, override=False)
            logger.info(f"Loaded environment variables from .env file: {dotenv_path}")
        else:
            logger.debug("No .env file found to load.")

    def _resolve_config_file_path(
        self, specific_path: Optional[Union[str, Path]]
    ) -> Optional[Path]:
        """Find the configuration file path."""
        if specific_path:
            p = Path(specific_path)
            if p.is_file():
                logger.debug(f"Using specified configuration file: {p}")
                return p
            raise ConfigurationError(
                f"Configuration file not found: {specific_path}",
                context={"path": str(specific_path)},
            )

        search_paths: List[Path] = [Path.cwd() / name for name in self.DEFAULT_CONFIG_FILES]
        for path in search_paths:
            if path.is_file():
                logger.debug(f"Found configuration file: {path}")
                return path

        logger.debug("No configuration file found in the working directory.")
        return None

    def _load_from_file(self) -> Dict[str, Any]:
        """Load configuration from the YAML file, if any."""
        if not self._config_file_path:
            return {}
        try:
            with open(self._config_file_path, "r") as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(
                f"Error parsing YAML configuration file {self._config_file_path}: {e}"
            )
            raise ConfigurationError(
                f"Invalid YAML format in {self._config_file_path}", original_exception=e
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Could not read file {self._config_file_path}", original_exception=e
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration file {self._config_file_path} does not contain a mapping."
            )
        logger.info(f"Loaded configuration from file: {self._config_file_path}")
        return file_config

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env = self.environ
        env_config: Dict[str, Any] = {}

        for env_var, field_name in DIRECT_ENV_VARS.items():
            if env_var in env:
                env_config[field_name] = env[env_var]

        nested_prefix = f"{self.env_prefix}MCP_"
        for env_var, value in env.items():
            if env_var.startswith(nested_prefix):
                key = env_var[len(nested_prefix) :].lower()
                if key in MCPSettings.model_fields:
                    env_config.setdefault("mcp", {})[key] = value
                    continue
            if not env_var.startswith(self.env_prefix):
                continue
            key = env_var[len(self.env_prefix) :].lower()
            if key in Settings.model_fields and key != "mcp":
                env_config[key] = value
            else:
                logger.debug(f"Ignoring unknown environment variable {env_var}")

        return env_config

    def load_settings(self, overrides: Optional[Dict[str, Any]] = None) -> Settings:
        """Merge every source and validate the result."""
        config: Dict[str, Any] = {}
        _deep_merge(self._load_from_file(), config)
        _deep_merge(self._load_from_env(), config)
        if overrides:
            _deep_merge(overrides, config)

        try:
            settings = Settings.model_validate(config)
        except ValidationError as e:
            logger.error(f"Configuration validation failed: {e}")
            raise ConfigurationError(
                "Configuration validation failed", original_exception=e
            ) from e

        logger.debug("Configuration loaded successfully.")
        return settings


def load_settings(
    config_file: Optional[Union[str, Path]] = None,
    require_token: bool = True,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """
    Load the process settings once at startup.

    Raises:
        ConfigurationMissingError: If ``require_token`` and no token is configured.
        ConfigurationError: If a source is unreadable or a value is invalid.
    """
    manager = ConfigurationManager(config_file_path=config_file, environ=environ)
    settings = manager.load_settings(overrides)
    if require_token and not settings.ghl_token:
        raise ConfigurationMissingError("GHL_TOKEN")
    return settings
