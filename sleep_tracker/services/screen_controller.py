"""
Shared plumbing for the per-screen controllers.

Each controller owns its background tasks, runs one intent at a time, and
reports store failures as a snackbar message instead of letting them escape
into a fire-and-forget task.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine, Set

from sleep_tracker.errors import StoreError
from sleep_tracker.services.live_data import OneShotEvent

logger = logging.getLogger(__name__)


class ScreenController:
    """Base class: task scope, intent serialization, notification event."""

    def __init__(self) -> None:
        # One intent at a time; back-to-back clicks queue up here
        self._lock = asyncio.Lock()
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

        self.show_snackbar = OneShotEvent()

    @property
    def closed(self) -> bool:
        return self._closed

    def acknowledge_notification(self) -> None:
        self.show_snackbar.acknowledge()

    # ── Task scope ──────────────────────────────────────────────────────────

    def _launch(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        if self._closed:
            coro.close()
            raise RuntimeError(f"{type(self).__name__} is closed.")
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Background task %s failed", task.get_name(), exc_info=exc)

    async def close(self) -> None:
        """Cancel every outstanding task and wait for them to finish."""
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("%s closed (%d task(s) cancelled).", type(self).__name__, len(tasks))

    # ── Errors ──────────────────────────────────────────────────────────────

    def _report(self, error: StoreError, action: str) -> None:
        logger.error("Could not %s: %s", action, error)
        self.show_snackbar.fire(f"Could not {action}. Please try again.")
