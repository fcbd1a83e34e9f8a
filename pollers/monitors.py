from __future__ import annotations

import threading
from dataclasses import dataclass, field

from pollers.config import PollerConfig


@dataclass
class _ResettableMonitor:
    """
    Keeps one slot per configured poller. Reading a poller's value resets
    only that poller's slot, so pollers running at different intervals each
    see what happened since their own previous poll.
    """

    name: str
    config: PollerConfig
    _slots: list[int | None] = field(init=False, repr=False)
    _lock: threading.Lock = field(init=False, repr=False, default_factory=threading.Lock)

    def __post_init__(self) -> None:
        self._slots = [None] * self.config.num_pollers

    def _check_index(self, poller_index: int) -> None:
        if not 0 <= poller_index < len(self._slots):
            raise IndexError(
                f"{self.name}: poller index {poller_index} out of range (0..{len(self._slots) - 1})"
            )

    def get_value(self, poller_index: int = 0) -> int:
        self._check_index(poller_index)
        with self._lock:
            value = self._slots[poller_index]
            self._slots[poller_index] = None
        return 0 if value is None else value


class ResettableCounter(_ResettableMonitor):
    def increment(self, amount: int = 1) -> None:
        with self._lock:
            self._slots = [(v or 0) + amount for v in self._slots]


class MinGauge(_ResettableMonitor):
    def update(self, value: int) -> None:
        with self._lock:
            self._slots = [value if v is None else min(v, value) for v in self._slots]


class MaxGauge(_ResettableMonitor):
    def update(self, value: int) -> None:
        with self._lock:
            self._slots = [value if v is None else max(v, value) for v in self._slots]
