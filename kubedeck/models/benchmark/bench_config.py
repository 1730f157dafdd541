"""Benchmark configuration models.

Layout of the per-cluster benchmark file::

    benchmarks:
      defaults:
        concurrency: 2
        requests: 200
      containers:
        default/nginx-5f8d|nginx:
          concurrency: 5
          requests: 1000
          http:
            method: POST
            path: /api/v1/ping
            headers:
              Content-Type: [application/json]
            body: '{"ping": true}'
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kubedeck.constants.defaults import (
    BENCH_CONCURRENCY_DEFAULT,
    BENCH_HTTP_METHOD_DEFAULT,
    BENCH_HTTP_PATH_DEFAULT,
    BENCH_REQUEST_COUNT_DEFAULT,
)
from kubedeck.constants.limits import BENCH_CONCURRENCY_MAX
from kubedeck.constants.values import FQN_CONTAINER_SEPARATOR


def container_id(path: str, container: str) -> str:
    """Key of a per-container override: ``namespace/pod|container``."""
    return f"{path}{FQN_CONTAINER_SEPARATOR}{container}"


class BenchmarkConfig(BaseModel):
    """Load-test parameters.

    Zero or empty fields mean "not set": when used as an override they fall
    back to the defaults during ``merged_over``.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    concurrency: int = Field(default=0, ge=0, le=BENCH_CONCURRENCY_MAX)
    request_count: int = Field(default=0, ge=0, alias="requests")
    http_method: str = Field(default="", alias="method")
    http_path: str = Field(default="", alias="path")
    headers: dict[str, list[str]] = Field(default_factory=dict)
    body: str = ""

    @model_validator(mode="before")
    @classmethod
    def _flatten_http_section(cls, data: Any) -> Any:
        """Accept the nested ``http: {method, path, headers, body}`` layout."""
        if not isinstance(data, dict) or not isinstance(data.get("http"), dict):
            return data
        flattened = {key: value for key, value in data.items() if key != "http"}
        for key, value in data["http"].items():
            flattened.setdefault(key, value)
        return flattened

    @field_validator("http_method")
    @classmethod
    def _normalize_method(cls, value: str) -> str:
        return (value or "").strip().upper()

    @field_validator("headers", mode="before")
    @classmethod
    def _normalize_headers(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {
            str(key): [str(item) for item in item_list] if isinstance(item_list, list) else [str(item_list)]
            for key, item_list in value.items()
        }

    @classmethod
    def builtin(cls) -> BenchmarkConfig:
        """Built-in defaults used when no file provides them."""
        return cls(
            concurrency=BENCH_CONCURRENCY_DEFAULT,
            request_count=BENCH_REQUEST_COUNT_DEFAULT,
            http_method=BENCH_HTTP_METHOD_DEFAULT,
            http_path=BENCH_HTTP_PATH_DEFAULT,
        )

    def merged_over(self, defaults: BenchmarkConfig) -> BenchmarkConfig:
        """Return ``defaults`` with every non-zero/non-empty field of self applied."""
        return BenchmarkConfig(
            name=self.name or defaults.name,
            concurrency=self.concurrency or defaults.concurrency,
            request_count=self.request_count or defaults.request_count,
            http_method=self.http_method or defaults.http_method,
            http_path=self.http_path or defaults.http_path,
            headers=dict(self.headers or defaults.headers),
            body=self.body or defaults.body,
        )

    def url_for(self, local_port: str, host: str = "localhost") -> str:
        """Target URL through a tunnel's local port."""
        path = self.http_path or BENCH_HTTP_PATH_DEFAULT
        if not path.startswith("/"):
            path = f"/{path}"
        return f"http://{host}:{local_port}{path}"


class BenchmarksSpec(BaseModel):
    """Defaults plus per-container overrides."""

    defaults: BenchmarkConfig = Field(default_factory=BenchmarkConfig.builtin)
    containers: dict[str, BenchmarkConfig] = Field(default_factory=dict)

    @field_validator("defaults", mode="after")
    @classmethod
    def _fill_defaults(cls, value: BenchmarkConfig) -> BenchmarkConfig:
        return value.merged_over(BenchmarkConfig.builtin())

    @field_validator("containers", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def resolve(self, key: str) -> BenchmarkConfig:
        """Effective config for a container key."""
        override = self.containers.get(key)
        if override is None:
            return self.defaults.model_copy(deep=True)
        return override.merged_over(self.defaults)


class BenchmarkFile(BaseModel):
    """Top-level document of ``bench-<cluster>.yml``."""

    benchmarks: BenchmarksSpec = Field(default_factory=BenchmarksSpec)

    @field_validator("benchmarks", mode="before")
    @classmethod
    def _none_is_default(cls, value: Any) -> Any:
        return {} if value is None else value


__all__ = [
    "BenchmarkConfig",
    "BenchmarkFile",
    "BenchmarksSpec",
    "container_id",
]
