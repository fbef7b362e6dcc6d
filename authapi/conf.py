"""Defines the authentication API client settings."""

import functools
import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from omegaconf import II, OmegaConf

SETTINGS_FILE_NAME = "settings.yaml"

DEFAULT_TIMEOUT_SECONDS = 30.0


def get_path() -> Path:
    if "AUTHAPI_CONFIG_DIR" in os.environ:
        return Path(os.environ["AUTHAPI_CONFIG_DIR"]).expanduser().resolve()
    return Path("~/.authapi/").expanduser().resolve()


@dataclass
class APISettings:
    base_url: str = field(default=II("oc.env:AUTHAPI_BASE_URL,'https://login.example.com'"))
    client_id: Optional[str] = field(default=II("oc.env:AUTHAPI_CLIENT_ID,null"))
    timeout_seconds: float = field(default=DEFAULT_TIMEOUT_SECONDS)


@dataclass
class Settings:
    api: APISettings = field(default_factory=APISettings)

    @functools.lru_cache
    @staticmethod
    def load() -> "Settings":
        config = OmegaConf.structured(Settings)
        if not (dir_path := get_path()).exists():
            warnings.warn(f"Settings directory does not exist: {dir_path}. Creating it now.")
            dir_path.mkdir(parents=True)
            OmegaConf.save(config, dir_path / SETTINGS_FILE_NAME)
        else:
            try:
                with open(dir_path / SETTINGS_FILE_NAME, "r") as f:
                    raw_settings = OmegaConf.load(f)
                    config = OmegaConf.merge(config, raw_settings)
            except Exception as e:
                warnings.warn(f"Failed to load settings: {e}")
        return config


def get_base_url() -> str:
    """Returns the account URL requests are sent to."""
    return Settings.load().api.base_url


def get_client_id() -> str | None:
    """Returns the default client ID, if one is configured."""
    return Settings.load().api.client_id


def get_timeout() -> float:
    return Settings.load().api.timeout_seconds
