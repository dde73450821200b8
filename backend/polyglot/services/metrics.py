"""Prometheus metrics instrumentation for the translation backend.

Metrics exported:
- ghananlp_request_latency_seconds: Histogram of upstream call time per endpoint
- translations_total: Counter of translations by mode and status
- activity_log_writes_total: Counter of activity-log writes by kind and status

Usage:
    from polyglot.services.metrics import start_metrics_server, translations_total

    start_metrics_server(port=8001)
    translations_total.labels(mode='pivot', status='success').inc()
"""

from prometheus_client import Histogram, Counter, start_http_server
import logging

logger = logging.getLogger(__name__)

upstream_latency = Histogram(
    'ghananlp_request_latency_seconds',
    'Time spent waiting on the GhanaNLP API',
    labelnames=['endpoint']
)

translations_total = Counter(
    'translations_total',
    'Total translation requests handled',
    labelnames=['mode', 'status']  # mode: direct, pivot; status: success, error
)

activity_log_writes = Counter(
    'activity_log_writes_total',
    'Activity-log writes attempted',
    labelnames=['kind', 'status']  # status: success, error
)


def start_metrics_server(port: int = 8001):
    """Start Prometheus metrics HTTP server."""
    try:
        start_http_server(port)
        logger.info(f"✅ Metrics server started on port {port}")
    except Exception as e:
        logger.error(f"❌ Failed to start metrics server: {e}")
