"""Tests for application settings and their persistence.

This module tests:
- AppSettings defaults, normalization and validation
- ConfigManager load/save round trip
- ConfigLoadError / ConfigSaveError reporting
- AppState wiring of per-cluster paths
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from kubedeck.constants.defaults import REFRESH_RATE_DEFAULT
from kubedeck.models.state.app_settings import AppSettings, ConfigLoadError, ConfigSaveError
from kubedeck.models.state.app_state import AppState
from kubedeck.models.state.config_manager import ConfigManager
from kubedeck.utils.dispatcher import QueueDispatcher

# =============================================================================
# AppSettings
# =============================================================================


class TestAppSettings:
    """Tests for AppSettings model."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.namespace == "*"
        assert settings.refresh_rate == REFRESH_RATE_DEFAULT
        assert settings.log_level == "INFO"
        assert settings.cluster_key == "default"

    @pytest.mark.unit
    @pytest.mark.fast
    @pytest.mark.parametrize("namespace", ["", "all", "-A", "  "])
    def test_all_namespace_spellings(self, namespace: str) -> None:
        assert AppSettings(namespace=namespace).namespace == "*"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_log_level_upper_cased(self) -> None:
        assert AppSettings(log_level=" debug ").log_level == "DEBUG"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_cluster_key_prefers_cluster(self) -> None:
        assert AppSettings(current_context="kind-dev").cluster_key == "kind-dev"
        assert AppSettings(current_context="ctx", current_cluster="prod").cluster_key == "prod"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_refresh_rate_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(refresh_rate=0)


# =============================================================================
# ConfigManager
# =============================================================================


class TestConfigManager:
    """Tests for ConfigManager."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert ConfigManager.load(tmp_path / "config.yml") == AppSettings()

    @pytest.mark.unit
    @pytest.mark.fast
    def test_save_then_load(self, tmp_path: Path) -> None:
        settings = AppSettings(current_context="kind-dev", namespace="web", refresh_rate=5)
        target = ConfigManager.save(settings, tmp_path / "nested" / "config.yml")

        assert target.exists()
        assert yaml.safe_load(target.read_text())["kubedeck"]["namespace"] == "web"
        assert ConfigManager.load(target) == settings

    @pytest.mark.unit
    @pytest.mark.fast
    def test_unwrapped_mapping_accepted(self, tmp_path: Path) -> None:
        target = tmp_path / "config.yml"
        target.write_text("namespace: kube-system\n")
        assert ConfigManager.load(target).namespace == "kube-system"

    @pytest.mark.unit
    @pytest.mark.fast
    @pytest.mark.parametrize(
        "content",
        [
            "kubedeck: [unclosed\n",
            "- just\n- a list\n",
            "kubedeck:\n  refresh_rate: -1\n",
        ],
    )
    def test_bad_file_raises(self, tmp_path: Path, content: str) -> None:
        target = tmp_path / "config.yml"
        target.write_text(content)
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(target)

    @pytest.mark.unit
    @pytest.mark.fast
    def test_unwritable_target_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(ConfigSaveError):
            ConfigManager.save(AppSettings(), blocker / "config.yml")

    @pytest.mark.unit
    @pytest.mark.fast
    def test_default_location_follows_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBEDECK_HOME", str(tmp_path))
        assert ConfigManager.save(AppSettings()) == tmp_path / "config.yml"


# =============================================================================
# AppState
# =============================================================================


class TestAppState:
    """Tests for AppState wiring."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_per_cluster_paths(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBEDECK_HOME", str(tmp_path))
        state = AppState(AppSettings(current_context="arn:aws:eks/prod"), QueueDispatcher())

        assert state.current_cluster() == "arn:aws:eks/prod"
        assert state.bench_config_path().parent == tmp_path
        assert state.bench_config_path().name == "bench-arn_aws_eks_prod.yml"
        assert state.bench_reports_dir() == tmp_path / "benchmarks" / "arn_aws_eks_prod"
        assert state.cluster.context == "arn:aws:eks/prod"

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_shutdown_cancels_scope(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBEDECK_HOME", str(tmp_path))
        state = AppState(AppSettings(), QueueDispatcher())
        await state.shutdown()
        assert state.scope.cancelled

    @pytest.mark.unit
    @pytest.mark.fast
    def test_missing_bench_file_loads_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBEDECK_HOME", str(tmp_path))
        state = AppState(AppSettings(), QueueDispatcher())
        assert state.load_bench_config() is True
        assert state.orchestrator.resolve_config("web/api-0", "app").request_count == 200
