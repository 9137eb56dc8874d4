"""
Console Screen — a text stand-in for the tracker and sleep-quality screens.

Observes the controllers' cells and follows their event contract: on
navigate_to_quality it opens the quality screen for that night and then
acknowledges; on show_snackbar it prints the message and acknowledges.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from sleep_tracker.data.models import SleepInterval
from sleep_tracker.data.repository import SleepRepository
from sleep_tracker.formatting import QUALITY_LABELS
from sleep_tracker.services.quality_controller import QualityController
from sleep_tracker.services.session_controller import SessionController, system_clock

logger = logging.getLogger(__name__)


class ConsoleScreen:
    """Reads commands from ``input_fn`` and prints through ``output``."""

    def __init__(
        self,
        repo: SleepRepository,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        clock: Callable[[], int] = system_clock,
    ) -> None:
        self.repo = repo
        self._input = input_fn
        self._print = output
        self.tracker = SessionController(repo, clock=clock)
        self.quality: Optional[QualityController] = None
        self._leaving_quality: Optional[QualityController] = None
        self.running = True

    # ── Lifecycle ───────────────────────────────────────────────────────────

    async def open(self) -> None:
        await self.tracker.initialize()
        self.tracker.nights_text.observe(self._show_history)
        self.tracker.navigate_to_quality.observe(self._on_navigate_to_quality)
        self.tracker.show_snackbar.observe(self._on_tracker_snackbar)

    async def run(self) -> None:
        await self.open()
        try:
            while self.running:
                line = await asyncio.to_thread(self._input, self.prompt())
                await self.handle(line)
        except EOFError:
            logger.info("Input closed; leaving.")
        finally:
            await self.close()

    async def close(self) -> None:
        if self.quality is not None:
            await self.quality.close()
            self.quality = None
        await self.tracker.close()

    # ── Commands ────────────────────────────────────────────────────────────

    def available_commands(self) -> List[str]:
        if self.quality is not None:
            return ["rate 0-5", "quit"]
        commands = []
        if self.tracker.start_button_visible.value:
            commands.append("start")
        if self.tracker.stop_button_visible.value:
            commands.append("stop")
        if self.tracker.clear_button_visible.value:
            commands.append("clear")
        commands += ["history", "quit"]
        return commands

    def prompt(self) -> str:
        return "[" + " | ".join(self.available_commands()) + "] > "

    async def handle(self, line: str) -> None:
        words = line.strip().lower().split()
        if not words:
            return
        command, args = words[0], words[1:]

        if command == "quit":
            self.running = False
        elif self.quality is not None:
            await self._handle_quality(command, args)
        elif command == "start" and self.tracker.start_button_visible.value:
            await self.tracker.start()
        elif command == "stop" and self.tracker.stop_button_visible.value:
            await self.tracker.stop()
        elif command == "clear" and self.tracker.clear_button_visible.value:
            await self.tracker.clear()
        elif command == "history":
            self._show_history(self.tracker.nights_text.value)
        else:
            self._print(f"Unknown command {command!r}. Try one of: {', '.join(self.available_commands())}")

        await self._finish_navigation()

    async def _handle_quality(self, command: str, args: List[str]) -> None:
        if command != "rate" or len(args) != 1 or not args[0].isdigit() \
                or int(args[0]) not in QUALITY_LABELS:
            self._print("Rate the night with 'rate N', N from 0 (very bad) to 5 (excellent).")
            return
        await self.quality.rate(int(args[0]))

    async def _finish_navigation(self) -> None:
        """Tear down a quality screen that asked to go back, then refresh the tracker."""
        leaving = self._leaving_quality
        if leaving is None:
            return
        self._leaving_quality = None
        await leaving.close()
        await self.tracker.refresh()

    # ── Observers ───────────────────────────────────────────────────────────

    def _show_history(self, text: str) -> None:
        self._print(text)

    def _on_navigate_to_quality(self, night: SleepInterval) -> None:
        self.quality = QualityController(self.repo, night.id)
        self.quality.navigate_to_tracker.observe(self._on_navigate_to_tracker)
        self.quality.show_snackbar.observe(self._on_quality_snackbar)
        self.tracker.acknowledge_navigation()
        self._print(f"How did you sleep (night #{night.id})?")

    def _on_navigate_to_tracker(self, night: Optional[SleepInterval]) -> None:
        self._leaving_quality = self.quality
        self.quality.acknowledge_navigation()
        self.quality = None

    def _on_tracker_snackbar(self, message: str) -> None:
        self._print(f"* {message}")
        self.tracker.acknowledge_notification()

    def _on_quality_snackbar(self, message: str) -> None:
        self._print(f"* {message}")
        if self.quality is not None:
            self.quality.acknowledge_notification()
        elif self._leaving_quality is not None:
            self._leaving_quality.acknowledge_notification()


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   The "view" half of the tracker. It knows nothing about SQL or state
#   rules; it subscribes to the controllers' cells and turns them into text,
#   and turns typed commands into controller intents.
#
# Key decisions:
#   - Commands mirror button visibility: "stop" is only accepted while the
#     Stop button would be visible, exactly like a hidden button can't be
#     clicked.
#   - Navigation back from the quality screen is finished after the command
#     completes, not inside the signal callback, because closing a
#     controller is async.
#
# Interviewer-friendly talking points:
#   1. Every event handler acknowledges the event after acting on it. That
#      is the one-shot contract: navigate exactly once per Stop.
#   2. input() blocks, so it runs on a worker thread via asyncio.to_thread
#      and the event loop stays free for store calls.
