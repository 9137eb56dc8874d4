"""
Human-readable rendering of sleep history for the tracker screen.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from sleep_tracker.data.models import SleepInterval

QUALITY_LABELS = {
    0: "Very bad",
    1: "Poor",
    2: "So-so",
    3: "OK",
    4: "Pretty good",
    5: "Excellent",
}

EMPTY_HISTORY_TEXT = "No sleep data yet."
TIMESTAMP_FORMAT = "%A %b-%d-%Y %H:%M"


def quality_label(rating: Optional[int]) -> str:
    return QUALITY_LABELS.get(rating, "--")


def format_duration(duration_ms: int) -> str:
    """Milliseconds as H:MM:SS."""
    total_seconds = max(duration_ms, 0) // 1000
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def format_timestamp(epoch_ms: int) -> str:
    return datetime.fromtimestamp(epoch_ms / 1000).strftime(TIMESTAMP_FORMAT)


def format_nights(nights: Iterable[SleepInterval]) -> str:
    """One block per night, in the order given."""
    blocks = []
    for night in nights:
        end = "in progress" if night.is_open else format_timestamp(night.end_time_ms)
        blocks.append(
            "\n".join([
                f"Start: {format_timestamp(night.start_time_ms)}",
                f"End: {end}",
                f"Quality: {quality_label(night.quality_rating)}",
                f"Hours:Minutes:Seconds {format_duration(night.duration_ms)}",
            ])
        )
    if not blocks:
        return EMPTY_HISTORY_TEXT
    return "\n\n".join(blocks)
