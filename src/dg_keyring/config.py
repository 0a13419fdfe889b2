"""Configuration models and loading utilities."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .models import KeyEntry
from .paths import default_config_file, project_config_file
from .range import SizeRange

_LOG_LEVEL_ENV = "DG_KEYRING_LOG_LEVEL"


class KeyRingOptions(BaseModel):
    """Policy applied to every entry added to a :class:`~dg_keyring.KeyRing`.

    Options are frozen: a ring never re-validates stored keys, so changing
    policy after construction is not supported.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key_size: Optional[SizeRange] = Field(default=None, description="Inclusive key length bounds in bytes")
    validation: Optional[Callable[[KeyEntry], Optional[str]]] = Field(
        default=None,
        description="Hook returning None to accept an entry or a rejection reason",
    )


class LoggingConfig(BaseModel):
    level: str = Field(
        default_factory=lambda: os.getenv(_LOG_LEVEL_ENV, "INFO"),
        description="Logging verbosity level",
    )

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    key_size: Optional[SizeRange] = Field(default=None, description="Default key size policy")

    def keyring_options(self) -> KeyRingOptions:
        return KeyRingOptions(key_size=self.key_size)


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield project_config_file()
    yield default_config_file()


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ValueError(f"Malformed configuration in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return AppConfig()


__all__ = [
    "AppConfig",
    "KeyRingOptions",
    "LoggingConfig",
    "config_search_paths",
    "load_config",
]
