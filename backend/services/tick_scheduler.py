"""
Fixed-interval tick timer built on the `schedule` library.

A private schedule.Scheduler is used rather than the module-level default
so one game's jobs never leak into another's. Everything runs on the
calling thread: run_pending() fires the tick job when it is due.
"""

import logging
import time
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)

# Upper bound on a single idle sleep so input is still polled promptly.
MAX_IDLE_SLEEP_SECONDS = 0.02


class TickScheduler:
    """Owns one repeating tick job and cancels it at most once."""

    def __init__(self, scheduler: Optional[schedule.Scheduler] = None):
        self.scheduler = scheduler or schedule.Scheduler()
        self._job: Optional[schedule.Job] = None

    @property
    def active(self) -> bool:
        return self._job is not None

    def start(self, interval_seconds: float, job: Callable[[], None]) -> schedule.Job:
        """
        Register `job` to run every `interval_seconds` and return the handle.

        Raises:
            RuntimeError: if a tick job is already registered
        """
        if self._job is not None:
            raise RuntimeError("Tick job already started")
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")

        self._job = self.scheduler.every(interval_seconds).seconds.do(job)
        logger.info(f"Scheduled tick every {interval_seconds * 1000:.0f} ms")
        return self._job

    def cancel(self) -> bool:
        """Cancel the tick job. Returns False if it was already cancelled."""
        if self._job is None:
            return False
        self.scheduler.cancel_job(self._job)
        self._job = None
        logger.info("Tick job cancelled")
        return True

    def run_pending(self) -> None:
        self.scheduler.run_pending()

    def idle_seconds(self) -> float:
        """Seconds until the next tick is due, capped for input polling."""
        idle = self.scheduler.idle_seconds
        if idle is None:
            return MAX_IDLE_SLEEP_SECONDS
        return max(0.0, min(idle, MAX_IDLE_SLEEP_SECONDS))

    def sleep_until_next(self) -> None:
        time.sleep(self.idle_seconds())
