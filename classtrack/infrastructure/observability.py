# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from classtrack.shared.config import load_config

_config = load_config()

REQUEST_LATENCY = Histogram(
    "classtrack_request_latency_seconds",
    "Request latency",
    labelnames=("method",),
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
REQUEST_COUNTER = Counter(
    "classtrack_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "status"),
)
AUTH_EVENTS = Counter(
    "classtrack_auth_events_total",
    "Authentication outcomes",
    labelnames=("action", "outcome"),
)


def metrics_enabled() -> bool:
    return _config.observability.metrics_enabled


def record_auth_event(action: str, outcome: str) -> None:
    if metrics_enabled():
        AUTH_EVENTS.labels(action=action, outcome=outcome).inc()


def record_request(endpoint: str, method: str, status: int, duration: float) -> None:
    if not metrics_enabled():
        return
    REQUEST_LATENCY.labels(method=method).observe(duration)
    REQUEST_COUNTER.labels(endpoint=endpoint, status=str(status)).inc()


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "AUTH_EVENTS",
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "record_auth_event",
    "record_request",
    "render_metrics",
]
