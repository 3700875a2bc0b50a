"""Monitoring utilities for Prometheus instrumentation."""

from .middleware import MetricsMiddleware
from .router import router

__all__ = ["MetricsMiddleware", "router"]
