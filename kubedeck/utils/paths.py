"""Filesystem locations used by KubeDeck."""

from __future__ import annotations

import os
import re
from pathlib import Path

from kubedeck.constants.defaults import (
    BENCH_FILE_PREFIX,
    BENCH_REPORTS_DIR_NAME,
    HOME_DIR_NAME,
    HOME_ENV_VAR,
    LOG_FILE_NAME,
    SETTINGS_FILE_NAME,
)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def kubedeck_home() -> Path:
    """Return the per-user KubeDeck directory ($KUBEDECK_HOME or ~/.kubedeck)."""
    override = os.environ.get(HOME_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / HOME_DIR_NAME


def settings_path() -> Path:
    return kubedeck_home() / SETTINGS_FILE_NAME


def log_file_path() -> Path:
    return kubedeck_home() / LOG_FILE_NAME


def bench_config_path(cluster: str) -> Path:
    """Return the benchmark-defaults file for a cluster."""
    return kubedeck_home() / f"{BENCH_FILE_PREFIX}-{safe_file_name(cluster or 'default')}.yml"


def bench_reports_dir(cluster: str) -> Path:
    """Return the directory holding saved benchmark reports for a cluster."""
    return kubedeck_home() / BENCH_REPORTS_DIR_NAME / safe_file_name(cluster or "default")


def safe_file_name(value: str) -> str:
    """Replace characters that are awkward in file names."""
    return _UNSAFE_CHARS.sub("_", value).strip("_") or "_"


__all__ = [
    "bench_config_path",
    "bench_reports_dir",
    "kubedeck_home",
    "log_file_path",
    "safe_file_name",
    "settings_path",
]
