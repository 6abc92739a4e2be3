"""In-memory vote repository for testing."""

from typing import Dict, Sequence

from board.domain.model import SessionContext
from board.domain.repository import VoteRepository
from board.domain.value import TargetType, VoteTarget, VoteValue

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (user, target type, target id) so an upsert always
    overwrites, like the store's unique constraint.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def scores(
        self, target_type: TargetType, target_ids: Sequence[int]
    ) -> Dict[int, int]:
        self.store.check("vote_scores")
        wanted = set(target_ids)
        totals: Dict[int, int] = {}
        for (_, kind, target_id), value in self.store.votes.items():
            if kind == target_type.value and target_id in wanted:
                totals[target_id] = totals.get(target_id, 0) + value
        return totals

    async def find_user_votes(
        self,
        session: SessionContext,
        target_type: TargetType,
        target_ids: Sequence[int],
    ) -> Dict[int, VoteValue]:
        self.store.check("find_user_votes")
        return {
            target_id: VoteValue(value)
            for (user_id, kind, target_id), value in self.store.votes.items()
            if user_id == session.user_id
            and kind == target_type.value
            and target_id in set(target_ids)
        }

    async def upsert(
        self, session: SessionContext, target: VoteTarget, value: VoteValue
    ) -> None:
        self.store.check("upsert_vote")
        key = (session.user_id, target.target_type.value, target.target_id)
        self.store.votes[key] = int(value)

    async def delete(self, session: SessionContext, target: VoteTarget) -> None:
        self.store.check("delete_vote")
        key = (session.user_id, target.target_type.value, target.target_id)
        self.store.votes.pop(key, None)
