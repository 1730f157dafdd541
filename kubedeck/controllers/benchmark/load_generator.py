"""HTTP load generator used by benchmarks."""

from __future__ import annotations

import asyncio
import logging
import time

import httpx

from kubedeck.constants.timeouts import BENCH_REQUEST_TIMEOUT
from kubedeck.models.benchmark.bench_config import BenchmarkConfig
from kubedeck.models.benchmark.bench_report import BenchmarkReport
from kubedeck.utils.cancellation import CancelScope

logger = logging.getLogger(__name__)


def _now() -> float:
    return time.perf_counter()


class LoadGenerator:
    """Issues ``request_count`` requests with ``concurrency`` workers."""

    def __init__(
        self,
        config: BenchmarkConfig,
        base_url: str,
        target_name: str = "",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = BENCH_REQUEST_TIMEOUT,
    ) -> None:
        self.config = config
        self.base_url = base_url
        self.target_name = target_name
        self._transport = transport
        self._timeout = timeout
        self._issued = 0

    @property
    def url(self) -> str:
        path = self.config.http_path or "/"
        if not path.startswith("/"):
            path = f"/{path}"
        return self.base_url.rstrip("/") + path

    def _headers(self) -> list[tuple[str, str]]:
        return [(key, value) for key, values in self.config.headers.items() for value in values]

    def _claim(self) -> bool:
        if self._issued >= self.config.request_count:
            return False
        self._issued += 1
        return True

    async def run(self, scope: CancelScope) -> BenchmarkReport:
        """Run to completion or until ``scope`` is cancelled.

        Returns:
            The report for every request that finished before stopping.
        """
        method = self.config.http_method or "GET"
        concurrency = max(1, min(self.config.concurrency or 1, self.config.request_count or 1))
        report = BenchmarkReport(
            target_name=self.target_name,
            url=self.url,
            method=method,
            concurrency=concurrency,
            requested=self.config.request_count,
        )
        self._issued = 0
        logger.info(
            "Benchmark %s: %s %s (c=%d, n=%d)",
            self.target_name, method, self.url, concurrency, self.config.request_count,
        )

        limits = httpx.Limits(max_keepalive_connections=concurrency, max_connections=concurrency)
        started = _now()
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            limits=limits,
            headers=self._headers(),
            transport=self._transport,
        ) as client:
            workers = [
                asyncio.create_task(self._worker(client, method, report, scope))
                for _ in range(concurrency)
            ]
            all_done = asyncio.gather(*workers)
            stopped = asyncio.create_task(scope.wait())
            try:
                await asyncio.wait({all_done, stopped}, return_when=asyncio.FIRST_COMPLETED)
            finally:
                stopped.cancel()
                for worker in workers:
                    worker.cancel()
                await asyncio.gather(all_done, stopped, return_exceptions=True)
            if not scope.cancelled and not all_done.cancelled():
                error = all_done.exception()
                if error is not None:
                    raise error

        report.elapsed_seconds = _now() - started
        report.canceled = scope.cancelled
        logger.info(
            "Benchmark %s finished: %d/%d requests in %.2fs",
            self.target_name, report.completed, report.requested, report.elapsed_seconds,
        )
        return report

    async def _worker(
        self,
        client: httpx.AsyncClient,
        method: str,
        report: BenchmarkReport,
        scope: CancelScope,
    ) -> None:
        content = self.config.body.encode("utf-8") if self.config.body else None
        while not scope.cancelled and self._claim():
            t0 = _now()
            try:
                response = await client.request(method, self.url, content=content)
            except httpx.HTTPError as exc:
                report.record_error(type(exc).__name__)
                continue
            report.record(response.status_code, (_now() - t0) * 1000.0)


__all__ = ["LoadGenerator"]
