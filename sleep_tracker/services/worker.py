"""
Runs blocking store calls on a worker thread and resumes on the event loop.
"""

from __future__ import annotations

import asyncio
import sqlite3
from typing import Any, Callable, TypeVar

from sleep_tracker.errors import StoreError

T = TypeVar("T")


async def run_store_call(operation: str, fn: Callable[..., T], *args: Any) -> T:
    """Await ``fn(*args)`` on a worker thread; sqlite3 failures become StoreError."""
    try:
        return await asyncio.to_thread(fn, *args)
    except sqlite3.Error as e:
        raise StoreError(operation, e) from e
