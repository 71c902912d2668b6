"""Prometheus metrics for loads and saves."""

from prometheus_client import Counter

loads_total = Counter(
    "transedit_loads_total",
    "Total translation snapshots served",
)

saves_total = Counter(
    "transedit_saves_total",
    "Total saves persisted",
    ["scope"],  # full, key
)

save_failures_total = Counter(
    "transedit_save_failures_total",
    "Total saves rejected",
    ["scope"],
)
