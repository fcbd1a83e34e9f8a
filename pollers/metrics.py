from __future__ import annotations

from prometheus_client import Gauge, start_http_server

from pollers.config import PollerConfig

pollers_configured = Gauge("pollers_configured", "Number of configured pollers")
poller_interval_ms = Gauge("poller_interval_ms", "Polling interval per poller (ms)", ["poller"])

_started = False


def publish_poller_config(config: PollerConfig) -> None:
    # drop labels of pollers the previous config had
    poller_interval_ms.clear()
    pollers_configured.set(config.num_pollers)
    for i, interval in enumerate(config.polling_intervals):
        poller_interval_ms.labels(poller=str(i)).set(interval)


def start_metrics_server(port: int = 9102, addr: str = "127.0.0.1") -> None:
    global _started
    if _started:
        return
    start_http_server(port, addr=addr)
    _started = True
