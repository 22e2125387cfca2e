from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry(auto_describe=True)
        self.normalize_requests_total = Counter(
            "loadshedding_normalize_requests_total",
            "Total normalize requests by document kind and status",
            labelnames=("kind", "status"),
            registry=self.registry,
        )
        self.records_normalized_total = Counter(
            "loadshedding_records_normalized_total",
            "Total records normalized by kind",
            labelnames=("kind",),
            registry=self.registry,
        )
        self.normalize_failures_total = Counter(
            "loadshedding_normalize_failures_total",
            "Total rejected documents by error class",
            labelnames=("error",),
            registry=self.registry,
        )
        self.normalize_duration_seconds = Histogram(
            "loadshedding_normalize_duration_seconds",
            "Duration of document normalization in seconds",
            registry=self.registry,
        )

    def mark_success(self, kind: str, record_count: int) -> None:
        self.normalize_requests_total.labels(kind=kind, status="success").inc()
        self.records_normalized_total.labels(kind=kind).inc(record_count)

    def mark_failure(self, kind: str, error: Exception) -> None:
        self.normalize_requests_total.labels(kind=kind, status="rejected").inc()
        self.normalize_failures_total.labels(error=type(error).__name__).inc()

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
