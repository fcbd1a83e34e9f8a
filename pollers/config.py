from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

# Load .env from project root
ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")

logger = logging.getLogger(__name__)

# e.g. "60000, 10000": main poller every 60s, secondary poller every 10s
POLLERS_ENV = "SERVO_POLLERS"
DEFAULT_POLLERS = "60000"

DEFAULT_POLLING_INTERVAL_MS = 60000
DEFAULT_POLLING_INTERVALS: tuple[int, ...] = (DEFAULT_POLLING_INTERVAL_MS,)

_DELIMITER = re.compile(r",\s*", re.ASCII)
_LONG_LITERAL = re.compile(r"[+-]?[0-9]+")
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


def _parse_long(token: str) -> int:
    if not _LONG_LITERAL.fullmatch(token):
        raise ValueError(f"not an integer literal: {token!r}")
    value = int(token)
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise ValueError(f"out of 64-bit range: {token!r}")
    return value


def parse_polling_intervals(raw: str) -> tuple[int, ...]:
    """
    Parse a comma separated list of polling intervals (ms).

    Any token that is not an integer, or an empty value, discards the whole
    list in favour of a single poller running every minute.
    """
    tokens = _DELIMITER.split(raw) if raw else []

    result: list[int] = []
    errors = False
    for token in tokens:
        try:
            result.append(_parse_long(token))
        except ValueError as e:
            logger.error("Cannot parse %r as a long: %s", token, e)
            errors = True

    if errors or not tokens:
        logger.info(
            "Using a default configuration of a poller with a %sms interval",
            DEFAULT_POLLING_INTERVAL_MS,
        )
        return DEFAULT_POLLING_INTERVALS

    return tuple(result)


def count_pollers(intervals: Sequence[int]) -> int:
    """Number of pollers that will run."""
    return len(intervals)


@dataclass(frozen=True)
class PollerConfig:
    raw: str
    polling_intervals: tuple[int, ...]  # ms, one entry per poller

    @classmethod
    def from_raw(cls, raw: str) -> "PollerConfig":
        return cls(raw=raw, polling_intervals=parse_polling_intervals(raw))

    @property
    def num_pollers(self) -> int:
        return count_pollers(self.polling_intervals)

    def interval_for(self, poller_index: int) -> int:
        if not 0 <= poller_index < self.num_pollers:
            raise IndexError(f"poller index {poller_index} out of range (0..{self.num_pollers - 1})")
        return self.polling_intervals[poller_index]


def load_poller_config(raw: str | None = None) -> PollerConfig:
    """
    Build the poller configuration once at startup.

    raw=None:
      read SERVO_POLLERS from the environment, "60000" when unset.
    Callers keep the returned object and hand it to monitors; calling again
    builds a new instance rather than changing an existing one.
    """
    if raw is None:
        raw = os.getenv(POLLERS_ENV, DEFAULT_POLLERS)
    return PollerConfig.from_raw(raw)


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key, str(default))
    try:
        return int(raw)
    except ValueError as e:
        raise RuntimeError(f"Invalid int for {key}: {raw}") from e


@dataclass(frozen=True)
class Settings:
    # Logging
    log_level: str
    logs_dir: Path | None

    # Metrics
    metrics_port: int
    metrics_addr: str


def load_settings() -> Settings:
    logs_dir = os.getenv("POLLERS_LOG_DIR", "")
    return Settings(
        log_level=os.getenv("POLLERS_LOG_LEVEL", "INFO"),
        logs_dir=Path(logs_dir) if logs_dir else None,
        metrics_port=_env_int("POLLERS_METRICS_PORT", 0),
        metrics_addr=os.getenv("POLLERS_METRICS_ADDR", "127.0.0.1"),
    )
