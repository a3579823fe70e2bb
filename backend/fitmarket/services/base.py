# backend/fitmarket/services/base.py
"""
Base Service Pattern for the fitmarket platform.

Services own a request-scoped session (when they need one) and time their
public operations with ``@BaseService.measure_operation``. Each measured call
feeds two sinks:

- in-process ``OperationStats`` per service class, read via ``get_metrics()``
- the Prometheus registry in ``monitoring.prometheus_metrics``
"""

from dataclasses import dataclass
from functools import wraps
import logging
import time
from typing import Any, Callable, ClassVar, Dict, Optional, TypeVar, cast

from sqlalchemy.orm import Session

from ..core.config import settings
from ..monitoring.prometheus_metrics import prometheus_metrics

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class OperationStats:
    """Running totals for one measured operation."""

    count: int = 0
    failures: int = 0
    total_time: float = 0.0
    min_time: float = float("inf")
    max_time: float = 0.0

    def add(self, elapsed: float, success: bool) -> None:
        self.count += 1
        self.total_time += elapsed
        self.min_time = min(self.min_time, elapsed)
        self.max_time = max(self.max_time, elapsed)
        if not success:
            self.failures += 1

    def summary(self) -> Dict[str, Any]:
        successes = self.count - self.failures
        return {
            "count": self.count,
            "avg_time": self.total_time / self.count,
            "min_time": self.min_time,
            "max_time": self.max_time,
            "success_rate": successes / self.count,
            "success_count": successes,
            "failure_count": self.failures,
        }


class BaseService:
    """
    Base class for service layer components.

    Attributes:
        db: Request-scoped session, or None for services assembled purely
            from injected collaborators
        logger: Logger named after the concrete service class
    """

    # service class name -> operation name -> stats
    _operation_stats: ClassVar[Dict[str, Dict[str, OperationStats]]] = {}

    def __init__(self, db: Optional[Session] = None):
        self.db = db
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def measure_operation(operation_name: str) -> Callable[[F], F]:
        """
        Time a synchronous service method.

        Usage:
            @BaseService.measure_operation("resolve_slug")
            def resolve_slug_outcome(self, token):
                ...

        Calls slower than ``settings.slow_operation_threshold_seconds`` are
        logged as warnings. Exceptions are recorded and re-raised unchanged.
        """

        def decorator(func: F) -> F:
            @wraps(func)
            def wrapper(self: "BaseService", *args: Any, **kwargs: Any) -> Any:
                started = time.perf_counter()
                error_type: Optional[str] = None
                try:
                    return func(self, *args, **kwargs)
                except Exception as exc:
                    error_type = type(exc).__name__
                    raise
                finally:
                    self._observe(operation_name, time.perf_counter() - started, error_type)

            return cast(F, wrapper)

        return decorator

    def _observe(self, operation: str, elapsed: float, error_type: Optional[str]) -> None:
        service_name = self.__class__.__name__
        success = error_type is None

        per_service = BaseService._operation_stats.setdefault(service_name, {})
        per_service.setdefault(operation, OperationStats()).add(elapsed, success)

        if elapsed > settings.slow_operation_threshold_seconds:
            self.logger.warning(
                "Slow operation detected: %s took %.2fs",
                operation,
                elapsed,
                extra={"service": service_name, "operation": operation},
            )

        prometheus_metrics.record_service_operation(
            service=service_name,
            operation=operation,
            duration=elapsed,
            status="success" if success else "error",
            error_type=error_type,
        )

    def get_metrics(self) -> Dict[str, Any]:
        """Per-operation timing summary for this service class."""
        per_service = BaseService._operation_stats.get(self.__class__.__name__, {})
        return {name: stats.summary() for name, stats in per_service.items() if stats.count}

    def reset_metrics(self) -> None:
        BaseService._operation_stats.pop(self.__class__.__name__, None)
        self.logger.info("Metrics reset for %s", self.__class__.__name__)
