"""
Prometheus metrics module for fitmarket.

Service timings come from the @measure_operation decorator; the resolution
counters below replace ad-hoc telemetry so that "not found" and
"upstream failed" can be told apart on a dashboard.
"""

from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

service_operation_duration_seconds = Histogram(
    "fitmarket_service_operation_duration_seconds",
    "Service operation duration in seconds",
    ["service", "operation"],
    registry=REGISTRY,
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

service_operations_total = Counter(
    "fitmarket_service_operations_total",
    "Total number of service operations",
    ["service", "operation", "status"],
    registry=REGISTRY,
)

errors_total = Counter(
    "fitmarket_errors_total",
    "Total number of errors",
    ["service", "operation", "error_type"],
    registry=REGISTRY,
)

slug_resolutions_total = Counter(
    "fitmarket_slug_resolutions_total",
    "Resolver outcomes by entity type and lookup method",
    ["entity_type", "method", "outcome"],  # method: slug | id; outcome: found | not_found | upstream_error
    registry=REGISTRY,
)

canonical_redirects_total = Counter(
    "fitmarket_canonical_redirects_total",
    "Resolved identifiers that required a redirect to the canonical URL",
    ["reason"],
    registry=REGISTRY,
)

image_fallbacks_total = Counter(
    "fitmarket_image_fallbacks_total",
    "Image selections that fell back to a placeholder",
    ["kind"],
    registry=REGISTRY,
)


class PrometheusMetrics:
    """Manages Prometheus metrics collection and exposure."""

    @staticmethod
    def record_service_operation(
        service: str,
        operation: str,
        duration: float,
        status: str = "success",
        error_type: Optional[str] = None,
    ) -> None:
        """
        Record service operation metrics from @measure_operation decorator.

        Args:
            service: Service name (e.g., 'SlugResolutionService')
            operation: Operation/method name (e.g., 'resolve_slug')
            duration: Operation duration in seconds
            status: Operation status ('success' or 'error')
            error_type: Type of error if status is 'error'
        """
        service_operation_duration_seconds.labels(service=service, operation=operation).observe(
            duration
        )
        service_operations_total.labels(service=service, operation=operation, status=status).inc()

        if status == "error" and error_type:
            errors_total.labels(service=service, operation=operation, error_type=error_type).inc()

    @staticmethod
    def record_slug_resolution(entity_type: str, method: str, outcome: str) -> None:
        slug_resolutions_total.labels(entity_type=entity_type, method=method, outcome=outcome).inc()

    @staticmethod
    def record_canonical_redirect(reason: str) -> None:
        canonical_redirects_total.labels(reason=reason).inc()

    @staticmethod
    def record_image_fallback(kind: str) -> None:
        image_fallbacks_total.labels(kind=kind).inc()

    @staticmethod
    def get_metrics() -> bytes:
        """Render the registry in Prometheus text exposition format."""
        return generate_latest(REGISTRY)


prometheus_metrics = PrometheusMetrics()
