"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter


cutout_requests_total = Counter(
    "cutout_requests_total",
    "Total number of background-removal requests by outcome.",
    ["outcome"],
)
