"""
Quality Controller — the follow-up screen that rates a night after Stop.
"""

from __future__ import annotations

import asyncio
import logging

from sleep_tracker.data.repository import SleepRepository
from sleep_tracker.errors import StoreError
from sleep_tracker.formatting import QUALITY_LABELS, quality_label
from sleep_tracker.services.live_data import OneShotEvent
from sleep_tracker.services.screen_controller import ScreenController
from sleep_tracker.services.worker import run_store_call

logger = logging.getLogger(__name__)

MISSING_NIGHT_MESSAGE = "That night no longer exists."


class QualityController(ScreenController):
    """Rates one night (by id), then asks to navigate back to the tracker."""

    def __init__(self, repo: SleepRepository, night_id: int) -> None:
        super().__init__()
        self.repo = repo
        self.night_id = night_id
        self.navigate_to_tracker = OneShotEvent()

    async def rate(self, quality: int) -> None:
        if not isinstance(quality, int) or quality not in QUALITY_LABELS:
            raise ValueError(
                f"Quality must be between {min(QUALITY_LABELS)} and "
                f"{max(QUALITY_LABELS)}, got {quality!r}."
            )
        async with self._lock:
            try:
                night = await run_store_call("get", self.repo.get, self.night_id)
                if night is None:
                    logger.warning("Night %s no longer exists; nothing to rate.", self.night_id)
                    self.show_snackbar.fire(MISSING_NIGHT_MESSAGE)
                    self.navigate_to_tracker.fire()
                    return
                night.quality_rating = quality
                await run_store_call("update", self.repo.update, night)
            except StoreError as e:
                self._report(e, "save the rating")
                return
            logger.info("Night %s rated %d (%s).", night.id, quality, quality_label(quality))
            self.navigate_to_tracker.fire(night)

    def acknowledge_navigation(self) -> None:
        self.navigate_to_tracker.acknowledge()

    def on_set_quality(self, quality: int) -> asyncio.Task:
        return self._launch(self.rate(quality))
