"""Shared in-memory tables for testing.

Repositories built over the same ``InMemoryStore`` see each other's
writes, mirroring how the real repositories share one store.
"""

from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Optional

from board.domain.error import StoreError
from board.domain.model import Comment, Profile, Thread
from board.domain.value import InviteToken, UserId


class InMemoryStore:
    """In-memory tables and procedure state."""

    def __init__(self) -> None:
        self.threads: dict[int, Thread] = {}
        self.comments: dict[int, Comment] = {}
        # (user_id, target_type, target_id) -> value
        self.votes: dict[tuple[UserId, str, int], int] = {}
        self.profiles: dict[UserId, Profile] = {}
        self.admins: set[UserId] = set()
        self.invite_tokens: set[str] = set()
        self.invited_users: set[UserId] = set()
        self.removal_reasons: dict[tuple[str, int], Optional[str]] = {}
        # Operation names that fail on their next calls, for fault injection
        self.failing: set[str] = set()
        self._ids = count(1)
        self._clock = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def next_id(self) -> int:
        return next(self._ids)

    def now(self) -> datetime:
        """Strictly increasing timestamps, one second apart."""
        self._clock += timedelta(seconds=1)
        return self._clock

    def check(self, operation: str) -> None:
        if operation in self.failing:
            raise StoreError(operation, "injected failure")

    def display_name(self, user_id: Optional[UserId]) -> Optional[str]:
        if user_id is None or user_id not in self.profiles:
            return None
        return self.profiles[user_id].display_name

    def add_invite(self, token: str) -> None:
        self.invite_tokens.add(InviteToken(token).root)
