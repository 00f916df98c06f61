import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from students_api.core.exceptions import ConfigError


CONFIG_PATH_ENV = "CONFIG_PATH"


class HTTPServerSettings(BaseModel):
    """Listener settings (``http_server`` section of the config file)."""

    model_config = ConfigDict(frozen=True)

    addr: str
    shutdown_timeout: float = 5.0

    @field_validator("addr")
    @classmethod
    def check_addr(cls, v: str) -> str:
        """Accept ``host:port`` or ``:port``."""
        _, sep, port = v.rpartition(":")
        if not sep or not port.isdigit() or not 0 <= int(port) <= 65535:
            raise ValueError(f"invalid listen address {v!r}, expected host:port")
        return v

    @property
    def host(self) -> str:
        host = self.addr.rpartition(":")[0].strip("[]")
        return host or "0.0.0.0"

    @property
    def port(self) -> int:
        return int(self.addr.rpartition(":")[2])


class Settings(BaseSettings):
    """
    Application settings.

    Values come from the YAML config file; environment variables
    (``ENV``, ``STORAGE_PATH``, ``HTTP_SERVER__ADDR``...) override them.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    env: str = "production"

    # =============================================================================
    # STORAGE
    # =============================================================================
    storage_path: str

    # =============================================================================
    # SERVER
    # =============================================================================
    http_server: HTTPServerSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # File values arrive as init kwargs; the environment takes precedence.
        return env_settings, dotenv_settings, init_settings


def resolve_config_path(argv: Optional[Sequence[str]] = None) -> str:
    """
    Find the config file path.

    Priority:
    1. ``CONFIG_PATH`` environment variable
    2. ``--config`` command-line flag
    """
    config_path = os.environ.get(CONFIG_PATH_ENV, "")
    if config_path:
        return config_path

    parser = argparse.ArgumentParser(prog="students-api")
    parser.add_argument("--config", default="", help="path to the configuration file")
    args, _ = parser.parse_known_args(argv)
    if not args.config:
        raise ConfigError("config path is not set")
    return args.config


def load_settings(argv: Optional[Sequence[str]] = None) -> Settings:
    """Load settings from the YAML file named by ``CONFIG_PATH`` or ``--config``."""
    config_path = Path(resolve_config_path(argv))
    if not config_path.is_file():
        raise ConfigError(f"config file does not exist: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"can not read config file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"can not read config file: {config_path} is not a mapping")

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"can not read config file: {e}") from e
