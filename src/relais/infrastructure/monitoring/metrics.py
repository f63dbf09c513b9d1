"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Histogram

# ============================================================
# Submission Metrics
# ============================================================

submissions_total = Counter(
    "relais_submissions_total",
    "Total signed action submissions",
    ["kind", "outcome"],
)

# ============================================================
# Blockchain Metrics
# ============================================================

chain_requests_total = Counter(
    "relais_chain_requests_total",
    "Total chain RPC reads",
    ["operation"],
)

chain_errors_total = Counter(
    "relais_chain_errors_total",
    "Total failed chain RPC reads",
    ["operation"],
)

chain_request_duration_seconds = Histogram(
    "relais_chain_request_duration_seconds",
    "Chain RPC read duration in seconds",
    ["operation"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

# ============================================================
# Notification Metrics
# ============================================================

notifications_total = Counter(
    "relais_notifications_total",
    "Total operator notifications",
    ["outcome"],
)
