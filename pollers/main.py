from __future__ import annotations

import argparse
import threading

from pollers.config import load_poller_config, load_settings
from pollers.logger import setup_logger
from pollers.metrics import publish_poller_config, start_metrics_server


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Poller interval configuration")
    p.add_argument("--pollers", type=str, default=None, help='e.g. "60000, 10000" (defaults to SERVO_POLLERS)')
    p.add_argument("--metrics-port", type=int, default=None, help="Expose config as prometheus gauges on this port")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="INFO/DEBUG/WARNING/ERROR",
    )
    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = load_settings()

    log = setup_logger("pollers", level=args.log_level)
    config = load_poller_config(args.pollers)

    log.info(
        "POLLERS num=%s intervals_ms=%s",
        config.num_pollers,
        ",".join(str(i) for i in config.polling_intervals),
    )

    port = args.metrics_port if args.metrics_port is not None else settings.metrics_port
    if port:
        publish_poller_config(config)
        start_metrics_server(port, addr=settings.metrics_addr)
        log.info("METRICS serving on %s:%s", settings.metrics_addr, port)
        try:
            threading.Event().wait()
        except KeyboardInterrupt:
            log.info("METRICS stopped")


if __name__ == "__main__":
    main()
