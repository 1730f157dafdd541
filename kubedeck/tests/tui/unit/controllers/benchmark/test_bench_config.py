"""Tests for benchmark configuration models and file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from kubedeck.controllers.benchmark import load_bench_file
from kubedeck.errors import BenchmarkConfigLoadError
from kubedeck.models.benchmark import BenchmarkConfig, BenchmarkFile, BenchmarksSpec, container_id

BENCH_YAML = """
benchmarks:
  defaults:
    concurrency: 10
    requests: 100
  containers:
    default/nginx|nginx:
      concurrency: 0
      requests: 50
      http:
        method: post
        path: api/ping
        headers:
          Content-Type: application/json
          Accept: [text/plain, application/json]
        body: '{"ping": true}'
"""


class TestBenchmarkConfig:
    """Tests for BenchmarkConfig."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_builtin_defaults(self) -> None:
        config = BenchmarkConfig.builtin()
        assert (config.concurrency, config.request_count) == (1, 200)
        assert (config.http_method, config.http_path) == ("GET", "/")

    @pytest.mark.unit
    @pytest.mark.fast
    def test_override_merge_zero_means_unset(self) -> None:
        """{C:10,N:100} defaults under a {C:0,N:50} override give {C:10,N:50}."""
        defaults = BenchmarkConfig(concurrency=10, request_count=100)
        override = BenchmarkConfig(concurrency=0, request_count=50)
        merged = override.merged_over(defaults)
        assert (merged.concurrency, merged.request_count) == (10, 50)

    @pytest.mark.unit
    @pytest.mark.fast
    def test_url_for(self) -> None:
        """The forward URL is built from the local port and http path."""
        assert BenchmarkConfig(http_path="/health").url_for("8080") == "http://localhost:8080/health"
        assert BenchmarkConfig(http_path="health").url_for("8080") == "http://localhost:8080/health"
        assert BenchmarkConfig().url_for("9090") == "http://localhost:9090/"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_negative_values_rejected(self) -> None:
        with pytest.raises(ValueError):
            BenchmarkConfig(concurrency=-1)


class TestBenchmarksSpec:
    """Tests for defaults/override resolution."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_partial_defaults_filled_from_builtin(self) -> None:
        spec = BenchmarksSpec.model_validate({"defaults": {"concurrency": 4}})
        assert spec.defaults.concurrency == 4
        assert spec.defaults.request_count == 200
        assert spec.defaults.http_method == "GET"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_resolve_unknown_container_returns_copy_of_defaults(self) -> None:
        spec = BenchmarksSpec()
        resolved = spec.resolve("ns/pod|app")
        resolved.concurrency = 99
        assert spec.defaults.concurrency == 1


class TestLoadBenchFile:
    """Tests for load_bench_file."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bench-dev.yml"
        path.write_text(BENCH_YAML, encoding="utf-8")
        bench = load_bench_file(path)

        resolved = bench.benchmarks.resolve(container_id("default/nginx", "nginx"))
        assert resolved.concurrency == 10
        assert resolved.request_count == 50
        assert resolved.http_method == "POST"
        assert resolved.http_path == "api/ping"
        assert resolved.headers == {
            "Content-Type": ["application/json"],
            "Accept": ["text/plain", "application/json"],
        }
        assert resolved.body == '{"ping": true}'

        other = bench.benchmarks.resolve("default/other|app")
        assert (other.concurrency, other.request_count) == (10, 100)

    @pytest.mark.unit
    @pytest.mark.fast
    def test_missing_and_empty_files_yield_defaults(self, tmp_path: Path) -> None:
        assert load_bench_file(tmp_path / "missing.yml") == BenchmarkFile()
        empty = tmp_path / "empty.yml"
        empty.write_text("", encoding="utf-8")
        assert load_bench_file(empty) == BenchmarkFile()

    @pytest.mark.unit
    @pytest.mark.fast
    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yml"
        path.write_text("benchmarks: [unclosed", encoding="utf-8")
        with pytest.raises(BenchmarkConfigLoadError):
            load_bench_file(path)

    @pytest.mark.unit
    @pytest.mark.fast
    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yml"
        path.write_text("benchmarks:\n  defaults:\n    concurrency: lots\n", encoding="utf-8")
        with pytest.raises(BenchmarkConfigLoadError, match="Invalid benchmark config"):
            load_bench_file(path)

    @pytest.mark.unit
    @pytest.mark.fast
    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(BenchmarkConfigLoadError, match="mapping"):
            load_bench_file(path)
