# -*- coding: utf-8 -*-

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger("worklog.ticker")


class Ticker:
    """
    Recurring callback on top of a Tk-style scheduler.

    `scheduler` only needs `after(ms, fn) -> job` and `after_cancel(job)`,
    which any Tk widget provides. At most one job is pending at a time.
    """

    def __init__(self, scheduler: Any, interval_ms: int = 1000):
        self.scheduler = scheduler
        self.interval_ms = int(interval_ms)
        self._callback: Optional[Callable[[], None]] = None
        self._job = None

    @property
    def active(self) -> bool:
        return self._job is not None

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        if self._job is None:
            self._job = self.scheduler.after(self.interval_ms, self._fire)

    def stop(self) -> None:
        if self._job is not None:
            try:
                self.scheduler.after_cancel(self._job)
            except Exception:
                # widget already destroyed
                logger.debug("after_cancel failed for job %r", self._job)
            self._job = None

    def _fire(self) -> None:
        self._job = None
        cb = self._callback
        if cb is None:
            return
        # schedule next before running, so the callback may stop() us
        self._job = self.scheduler.after(self.interval_ms, self._fire)
        cb()
