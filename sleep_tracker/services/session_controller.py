"""
Session Controller — start, stop and clear sleep tracking for the tracker screen.

Owns the in-memory notion of "tonight" (the open interval, if any), derives
the visibility of the Start / Stop / Clear buttons and the history summary,
and raises one-shot events for navigation to the quality screen and for
snackbar messages.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import replace
from typing import Callable, Optional

from sleep_tracker.data.models import SleepInterval
from sleep_tracker.data.repository import SleepRepository
from sleep_tracker.errors import StoreError
from sleep_tracker.formatting import format_nights
from sleep_tracker.services.live_data import LiveValue, OneShotEvent, map_live
from sleep_tracker.services.screen_controller import ScreenController
from sleep_tracker.services.worker import run_store_call

logger = logging.getLogger(__name__)

Clock = Callable[[], int]

CLEARED_MESSAGE = "All your data is now gone forever."


def system_clock() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


class SessionController(ScreenController):
    """
    Tracks at most ONE open night at a time.

        no night open --start()--> night open --stop()--> no night open
        any state     --clear()--> no night open, history empty

    Start and stop re-read "tonight" from the store afterwards; the store,
    not the object we just wrote, is the source of truth. A failed write
    leaves tonight exactly as the store still has it.
    """

    def __init__(self, repo: SleepRepository, clock: Clock = system_clock) -> None:
        super().__init__()
        self.repo = repo
        self.clock = clock

        self.tonight = LiveValue(None)
        self.nights = LiveValue([])

        self.nights_text = map_live(self.nights, format_nights)
        self.start_button_visible = map_live(self.tonight, lambda night: night is None)
        self.stop_button_visible = map_live(self.tonight, lambda night: night is not None)
        self.clear_button_visible = map_live(self.nights, lambda nights: len(nights) > 0)

        self.navigate_to_quality = OneShotEvent()

    # ── Intents ─────────────────────────────────────────────────────────────

    async def initialize(self) -> None:
        """Load tonight and the history. Call once, before any user intent."""
        await self.refresh()
        logger.info("Tracker initialized: %d night(s), tonight=%s",
                    len(self.nights.value), self._tonight_id())

    async def refresh(self) -> None:
        async with self._lock:
            try:
                await self._reload()
            except StoreError as e:
                self._report(e, "load your sleep data")

    async def start(self) -> None:
        async with self._lock:
            if self.tonight.value is not None:
                logger.debug("Start ignored: night %s is already open.", self._tonight_id())
                return
            now = self.clock()
            try:
                await run_store_call(
                    "insert", self.repo.insert,
                    SleepInterval(start_time_ms=now, end_time_ms=now),
                )
                await self._reload()
            except StoreError as e:
                self._report(e, "start tracking")
                return
            logger.info("Sleep tracking started for night %s.", self._tonight_id())

    async def stop(self) -> None:
        async with self._lock:
            night = self.tonight.value
            if night is None:
                logger.debug("Stop ignored: no night is open.")
                return
            # A closed night must end strictly after it started
            closing = replace(night, end_time_ms=max(self.clock(), night.start_time_ms + 1))
            # Navigation fires on the intent, before the update is confirmed
            self.navigate_to_quality.fire(closing)
            try:
                await run_store_call("update", self.repo.update, closing)
                await self._reload()
            except StoreError as e:
                self._report(e, "stop tracking")
                return
            logger.info("Night %s stopped after %d ms.", closing.id, closing.duration_ms)

    async def clear(self) -> None:
        async with self._lock:
            try:
                await run_store_call("clear", self.repo.clear)
            except StoreError as e:
                self._report(e, "clear your sleep data")
                return
            # The store is empty now; no need to read it back
            self.tonight.set(None)
            self.nights.set([])
            self.show_snackbar.fire(CLEARED_MESSAGE)

    def acknowledge_navigation(self) -> None:
        self.navigate_to_quality.acknowledge()

    # ── Click handlers (fire and forget) ────────────────────────────────────

    def on_start_tracking(self) -> asyncio.Task:
        return self._launch(self.start())

    def on_stop_tracking(self) -> asyncio.Task:
        return self._launch(self.stop())

    def on_clear(self) -> asyncio.Task:
        return self._launch(self.clear())

    # ── Helpers ─────────────────────────────────────────────────────────────

    async def _reload(self) -> None:
        self.tonight.set(await self._tonight_from_store())
        self.nights.set(await run_store_call("get_all", self.repo.get_all))

    async def _tonight_from_store(self) -> Optional[SleepInterval]:
        night = await run_store_call("get_most_recent", self.repo.get_most_recent)
        if night is None or not night.is_open:
            return None
        return night

    def _tonight_id(self) -> Optional[int]:
        night = self.tonight.value
        return night.id if night is not None else None


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   The state machine behind the tracker screen. Two states only: a night
#   is open (tonight is set) or it is not. Everything the screen shows is
#   derived from tonight and the history list.
#
# Data flow:
#   Start click → on_start_tracking() → task → start() → insert on a worker
#   thread → re-read most recent night → tonight changes → button
#   visibility cells recompute → screen updates.
#   Stop click → navigate_to_quality fires → update on a worker thread →
#   tonight re-read (now closed, so None) → Start button back.
#
# Interviewer-friendly talking points:
#   1. The re-read after insert: we never trust the object we just wrote.
#      If the insert silently did nothing, tonight stays None and the UI
#      stays consistent with the database.
#   2. The asyncio.Lock closes the double-click race: two quick Start clicks
#      queue up, and the second one sees tonight already set and no-ops.
#   3. Navigation fires before the update lands. If the update fails the
#      quality screen still opens, and the failure shows up as a snackbar.
