"""Loading of per-cluster benchmark files."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubedeck.errors import BenchmarkConfigLoadError
from kubedeck.models.benchmark.bench_config import BenchmarkFile

logger = logging.getLogger(__name__)


def load_bench_file(path: Path) -> BenchmarkFile:
    """Load ``bench-<cluster>.yml``.

    A missing or empty file yields the built-in defaults.

    Raises:
        BenchmarkConfigLoadError: The file is unreadable, not YAML, or does not
            match the schema.
    """
    if not path.exists():
        logger.debug("No benchmark file at %s, using defaults", path)
        return BenchmarkFile()
    try:
        with open(path, encoding="utf-8") as handle:
            raw = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as exc:
        raise BenchmarkConfigLoadError(f"Unable to load benchmark config {path}: {exc}") from exc

    if raw is None:
        return BenchmarkFile()
    if not isinstance(raw, dict):
        raise BenchmarkConfigLoadError(f"Benchmark config {path} must contain a mapping")
    try:
        return BenchmarkFile.model_validate(raw)
    except ValidationError as exc:
        raise BenchmarkConfigLoadError(f"Invalid benchmark config {path}: {exc}") from exc


__all__ = ["load_bench_file"]
