"""Prometheus metrics instrumentation for message routing.

Metrics exported:
- chat_messages_sent_total: Counter of stored messages by transport
- chat_messages_delivered_total: Counter of live deliveries to recipient connections
- chat_messages_seen_total: Counter of seen receipts
- chat_live_connections: Gauge of currently open WebSocket connections

Usage:
    from app.services.metrics import start_metrics_server, messages_sent

    start_metrics_server(port=8001)
    messages_sent.labels(transport='rest').inc()
"""

from prometheus_client import Counter, Gauge, start_http_server
import logging

logger = logging.getLogger(__name__)

messages_sent = Counter(
    'chat_messages_sent_total',
    'Total messages accepted by the router',
    labelnames=['transport']  # transport: rest, live
)

messages_delivered = Counter(
    'chat_messages_delivered_total',
    'Total pushes of a message to a recipient connection'
)

messages_seen = Counter(
    'chat_messages_seen_total',
    'Total seen receipts recorded'
)

live_connections_gauge = Gauge(
    'chat_live_connections',
    'Number of currently open live connections'
)


def start_metrics_server(port: int = 8001):
    """Start Prometheus metrics HTTP server."""
    try:
        start_http_server(port)
        logger.info(f"✅ Metrics server started on port {port}")
    except Exception as e:
        logger.error(f"❌ Failed to start metrics server: {e}")
