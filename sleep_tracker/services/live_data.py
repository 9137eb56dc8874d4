"""
Observable cells the controllers expose to whatever screen consumes them.

Built on Qt signals so any QObject-based view can connect slots directly,
while plain Python callables work just as well for the console screen and
for tests. Cells are only ever written from the event-loop thread, so every
emission is a direct, synchronous call.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, Signal


class LiveValue(QObject):
    """Holds a value and emits ``changed`` whenever it is set to something new."""

    changed = Signal(object)

    def __init__(self, value: Any = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        if value == self._value:
            return
        self._value = value
        self.changed.emit(value)

    def observe(self, callback: Callable[[Any], None]) -> None:
        """Subscribe and immediately receive the current value."""
        self.changed.connect(callback)
        callback(self._value)


def map_live(source: LiveValue, fn: Callable[[Any], Any]) -> LiveValue:
    """A LiveValue that is always ``fn(source.value)``."""
    derived = LiveValue(fn(source.value), parent=source)
    source.changed.connect(lambda value: derived.set(fn(value)))
    return derived


class OneShotEvent(QObject):
    """
    A pending event that stays pending until the consumer acknowledges it.

    ``pending`` tells "no event" apart from "event without data", so a
    payload of None is still a real event.
    """

    fired = Signal(object)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._pending = False
        self._payload: Any = None

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def payload(self) -> Any:
        return self._payload

    def fire(self, payload: Any = None) -> None:
        self._pending = True
        self._payload = payload
        self.fired.emit(payload)

    def acknowledge(self) -> None:
        # Acknowledging twice (or with nothing pending) is harmless
        self._pending = False
        self._payload = None

    def observe(self, callback: Callable[[Any], None]) -> None:
        """Subscribe; an event that is already pending is delivered right away."""
        self.fired.connect(callback)
        if self._pending:
            callback(self._payload)


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Two tiny observer primitives. LiveValue is "state": it always has a
#   value, and subscribers get the current one on subscribe. OneShotEvent is
#   "something happened": it is either pending with a payload or not pending.
#
# Key design decisions:
#   - Qt signals/slots as the observer mechanism. The controller never knows
#     who is listening, it just sets a value or fires an event.
#   - map_live mirrors a derived property: the start button's visibility is
#     just "tonight is None", recomputed every time tonight changes.
#   - Events are explicit about acknowledgement instead of resetting a
#     generic value back to None/False.
#
# Interviewer-friendly talking points:
#   1. Signals emitted outside a running Qt event loop still call directly
#      connected callables synchronously, so this works in a console app.
#   2. LiveValue dedupes on equality: setting the same visibility twice does
#      not spam subscribers.
