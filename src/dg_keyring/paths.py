"""Locations of per-user keyring configuration."""
from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import user_config_path

CONFIG_FILENAME = "keyring.yaml"


def runtime_config_dir() -> Path:
    # Windows and macOS use a display name, Linux a lower-case slug under XDG.
    if sys.platform in ("win32", "darwin"):
        return user_config_path("Data Guardian Keyring", appauthor=False, roaming=True)
    return user_config_path("dg-keyring", appauthor=False)


def default_config_file() -> Path:
    return runtime_config_dir() / CONFIG_FILENAME


def project_config_file(root: Path | None = None) -> Path:
    return (root or Path.cwd()) / ".dg" / CONFIG_FILENAME


__all__ = ["CONFIG_FILENAME", "default_config_file", "project_config_file", "runtime_config_dir"]
