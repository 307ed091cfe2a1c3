"""Structured logs and in-process counters for Lob calls.

Every log line is a single JSON object with an ``event`` key. Counters are
keyed ``name|label=value,...`` with labels sorted, e.g.
``lob.requests|operation=get_address,outcome=success``.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from datetime import date, datetime
from threading import Lock
from typing import Any


logger = logging.getLogger("lobmail")

REQUESTS_METRIC = "lob.requests"

_metrics_lock = Lock()
_metrics_counter: Counter[str] = Counter()


def _normalize(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_normalize(v) for v in value]
    return str(value)


def _metric_key(name: str, labels: dict[str, Any]) -> str:
    if not labels:
        return name
    ordered = ",".join(f"{k}={_normalize(labels[k])}" for k in sorted(labels))
    return f"{name}|{ordered}"


def incr_metric(name: str, value: int = 1, **labels: Any) -> None:
    key = _metric_key(name, labels)
    with _metrics_lock:
        _metrics_counter[key] += value


def count_request(operation: str, outcome: str) -> None:
    """Count one finished Lob call; ``outcome`` is ``success`` or a ``LobError.kind``."""
    incr_metric(REQUESTS_METRIC, operation=operation, outcome=outcome)


def metrics_snapshot(prefix: str | None = None) -> dict[str, int]:
    with _metrics_lock:
        counters = dict(_metrics_counter)
    if prefix is None:
        return counters
    return {key: count for key, count in counters.items() if key.startswith(prefix)}


def reset_metrics() -> None:
    with _metrics_lock:
        _metrics_counter.clear()


def log_event(event: str, *, level: int = logging.INFO, **fields: Any) -> None:
    payload = {"event": event}
    for key, value in fields.items():
        payload[key] = _normalize(value)
    logger.log(level, json.dumps(payload, sort_keys=True))
