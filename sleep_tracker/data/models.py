"""
Data model for SleepTracker.

One plain dataclass per table row, so the controllers never handle raw
sqlite3.Row objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class SleepInterval:
    """
    One recorded night, from 'Start' to 'Stop'.

    While the night is in progress end_time_ms equals start_time_ms.
    Times are milliseconds since the epoch.
    """
    id: Optional[int] = None
    start_time_ms: int = 0
    end_time_ms: int = 0
    quality_rating: Optional[int] = None  # 0..5, set on the quality screen

    @property
    def is_open(self) -> bool:
        return self.end_time_ms == self.start_time_ms

    @property
    def duration_ms(self) -> int:
        if self.is_open:
            return 0
        return max(self.end_time_ms - self.start_time_ms, 0)


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Defines the single persisted entity, a night of sleep, as a dataclass.
#
# Key decisions:
#   - Milliseconds as ints: matches what the clock hands us and sorts/compares
#     trivially in SQLite. Rendering to human time happens in formatting.py.
#   - "Open" is encoded as end == start instead of a NULL end time. A brand
#     new row is a valid zero-length interval, and the controller asks
#     is_open to decide whether a night is still running.
#
# Interviewer-friendly talking points:
#   1. Anything with end != start counts as closed, even the impossible
#      end < start case. duration_ms clamps that to 0 so summaries never
#      show negative durations.
