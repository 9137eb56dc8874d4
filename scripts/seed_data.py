"""
Seed Data Generator — creates realistic fake nights for development and testing.

Run: python scripts/seed_data.py [num_nights]
"""

import random
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sleep_tracker.data.database import Database
from sleep_tracker.data.models import SleepInterval
from sleep_tracker.data.repository import SleepRepository


def _ms(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


def seed(repo: SleepRepository, num_nights: int = 30,
         rng: Optional[random.Random] = None) -> List[SleepInterval]:
    """Insert ``num_nights`` closed, rated nights ending yesterday, oldest first."""
    rng = rng or random.Random()
    today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    base_date = today - timedelta(days=num_nights)

    nights = []
    for i in range(num_nights):
        # Bedtime between 21:30 and 01:30
        bedtime = base_date + timedelta(days=i, hours=21, minutes=30) \
            + timedelta(minutes=rng.randint(0, 240))
        # Sleep 4.5-9.5 hours
        wake = bedtime + timedelta(minutes=rng.uniform(270, 570))

        # Short nights tend to be rated worse
        hours = (wake - bedtime).total_seconds() / 3600.0
        quality = min(5, max(0, int(round(hours - 4 + rng.uniform(-1.5, 1.0)))))

        nights.append(repo.insert(SleepInterval(
            start_time_ms=_ms(bedtime),
            end_time_ms=_ms(wake),
            quality_rating=quality,
        )))
    return nights


if __name__ == "__main__":
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 30
    db = Database()
    db.connect()
    seed(SleepRepository(db.conn), count)
    db.close()
    print(f"Seeded {count} nights.")


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this script does:
#   Generates realistic fake nights so you can demo the tracker without
#   sleeping for 30 days first.
#
# Key points:
#   - Realistic distributions: bedtimes 21:30-01:30, 4.5-9.5 hours of sleep,
#     quality loosely correlated with duration.
#   - Every seeded night is closed, so the tracker starts with the Start
#     button visible.
#   - Uses the same repository interface as the real app, no raw SQL.
