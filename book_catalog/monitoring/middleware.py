"""Request metrics for the book catalog, exposed in Prometheus text format.

Series are keyed by HTTP method and route template, so `/api/books/{book_id}`
is one series however many books the catalog holds. Static asset requests are
folded into a single `/static` label.
"""

from __future__ import annotations

import threading
import time
from collections import defaultdict
from dataclasses import dataclass

METRIC_PREFIX = "catalog"

MetricKey = tuple[str, str, str]
RouteKey = tuple[str, str]


@dataclass
class LatencyStats:
    """Running latency totals for one catalog route."""

    count: int = 0
    total_duration: float = 0.0

    def observe(self, duration: float) -> None:
        self.count += 1
        self.total_duration += duration


_request_counts: dict[MetricKey, int] = defaultdict(int)
_error_counts: dict[MetricKey, int] = defaultdict(int)
_latency_stats: dict[RouteKey, LatencyStats] = defaultdict(LatencyStats)
_metrics_lock = threading.Lock()


def _route_label(scope) -> str:
    """Label requests by route template so each book id does not get its own series."""

    route = scope.get("route")
    template = getattr(route, "path", None)
    if template:
        return template
    path = scope.get("path", "")
    if path.startswith("/static/"):
        return "/static"
    return path


class MetricsMiddleware:
    """Wraps the catalog app and records one sample per book, stats or static request.

    Scrapes of `/metrics` are not counted.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[override]
        if scope.get("type") != "http" or scope.get("path") == "/metrics":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "UNKNOWN")
        start_time = time.perf_counter()
        status_holder: dict[str, int] = {}

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_holder["status"] = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            record_request(method, _route_label(scope), 500, time.perf_counter() - start_time)
            raise
        record_request(
            method,
            _route_label(scope),
            status_holder.get("status", 500),
            time.perf_counter() - start_time,
        )


def record_request(method: str, route: str, status: int, duration: float) -> None:
    key: MetricKey = (method, route, str(status))
    with _metrics_lock:
        _request_counts[key] += 1
        _latency_stats[(method, route)].observe(duration)
        if status >= 500:
            _error_counts[key] += 1


def render_metrics() -> str:
    """Render the catalog request series for `GET /metrics`."""

    requests = f"{METRIC_PREFIX}_requests_total"
    errors = f"{METRIC_PREFIX}_request_errors_total"
    duration = f"{METRIC_PREFIX}_request_duration_seconds"

    lines = [
        f"# HELP {requests} Total HTTP requests",
        f"# TYPE {requests} counter",
    ]
    with _metrics_lock:
        for (method, route, status), value in sorted(_request_counts.items()):
            lines.append(f'{requests}{{method="{method}",path="{route}",status="{status}"}} {value}')

        lines.append(f"# HELP {errors} HTTP requests answered with a 5xx status")
        lines.append(f"# TYPE {errors} counter")
        for (method, route, status), value in sorted(_error_counts.items()):
            lines.append(f'{errors}{{method="{method}",path="{route}",status="{status}"}} {value}')

        lines.append(f"# HELP {duration} Time spent handling requests")
        lines.append(f"# TYPE {duration} summary")
        for (method, route), stats in sorted(_latency_stats.items()):
            lines.append(f'{duration}_sum{{method="{method}",path="{route}"}} {stats.total_duration}')
            lines.append(f'{duration}_count{{method="{method}",path="{route}"}} {stats.count}')

    return "\n".join(lines) + "\n"
