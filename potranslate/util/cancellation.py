"""Cooperative cancellation token driven by process signals."""

from __future__ import annotations

import contextlib
import logging
import signal
import threading
from collections.abc import Iterator, Sequence
from types import FrameType

__all__ = ["CancellationEvent", "INTERRUPT_SIGNALS", "listen_for_interrupts"]

logger = logging.getLogger(__name__)

INTERRUPT_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class CancellationEvent:
    """Single-writer flag polled by the pipeline at safe points."""

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        """Return ``True`` when cancellation has been requested."""

        return self._event.is_set()

    def set(self) -> None:
        """Request cancellation."""

        self._event.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Sleep up to *timeout* seconds, waking early on cancellation."""

        return self._event.wait(timeout)


@contextlib.contextmanager
def listen_for_interrupts(
    event: CancellationEvent,
    signals: Sequence[signal.Signals] = INTERRUPT_SIGNALS,
) -> Iterator[CancellationEvent]:
    """Set *event* when one of *signals* arrives while the block runs.

    The previous handlers are restored on exit. Must be entered from the main
    thread, as required by :func:`signal.signal`.
    """

    def _handler(signum: int, _frame: FrameType | None) -> None:
        if not event.cancelled:
            logger.info("Interrupt received (signal %s), finishing current step", signum)
        event.set()

    previous = {sig: signal.signal(sig, _handler) for sig in signals}
    try:
        yield event
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
