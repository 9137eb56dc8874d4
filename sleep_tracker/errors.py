"""Exceptions shared across the data and service layers."""

from __future__ import annotations


class StoreError(RuntimeError):
    """A store call failed. Carries which operation and the underlying cause."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(f"Store operation '{operation}' failed: {cause}")
        self.operation = operation
        self.cause = cause
