"""Errors raised while producing the calendar feed."""

from __future__ import annotations

from pathlib import Path


class FeedError(Exception):
    pass


class FeedEncodingError(FeedError):
    pass


class FeedPersistenceError(FeedError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write calendar to {path}: {reason}")
        self.path = path
        self.reason = reason
