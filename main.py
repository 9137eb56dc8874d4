"""
SleepTracker — record when you go to sleep and when you wake up.
Entry point for the application.
"""

import asyncio
import faulthandler
import logging
from pathlib import Path

faulthandler.enable()

from sleep_tracker.config import load_config
from sleep_tracker.data.database import Database
from sleep_tracker.data.repository import SleepRepository
from sleep_tracker.ui.console import ConsoleScreen


def setup_logging(level: str = "INFO", log_file: str = "sleep_tracker.log") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def main() -> None:
    config = load_config()
    setup_logging(config["log_level"], config["log_file"])
    logger = logging.getLogger(__name__)
    logger.info("Starting SleepTracker...")

    db = Database(Path(config["db_path"]))
    db.connect()
    screen = ConsoleScreen(SleepRepository(db.conn))
    try:
        asyncio.run(screen.run())
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        db.close()
        logger.info("SleepTracker exited.")


if __name__ == "__main__":
    main()
