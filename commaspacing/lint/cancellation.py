"""Cooperative cancellation for long analysis passes."""

from __future__ import annotations

import threading


class AnalysisCancelled(RuntimeError):
    """Raised when a cancellation token fires mid-analysis; no diagnostics escape."""


class CancellationToken:
    """Thread-safe, non-blocking cancellation flag checked by the evaluator."""

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise AnalysisCancelled("Analysis was cancelled")
