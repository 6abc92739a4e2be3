"""Store-backed vote repository."""

from typing import Dict, Sequence

from board.adapter.error import ProviderError
from board.adapter.store import StoreClient
from board.domain.error import StoreError
from board.domain.model import SessionContext
from board.domain.repository import VoteRepository
from board.domain.value import TargetType, VoteTarget, VoteValue
from board.persistence.mappers import row_to_vote_value

# Unique key of the votes table
VOTE_CONFLICT_COLUMNS = "user_id,target_type,target_id"


def _in_filter(ids: Sequence[int]) -> str:
    return f"in.({','.join(str(i) for i in ids)})"


class StoreVoteRepository(VoteRepository):
    """Vote repository over the store's REST surface."""

    def __init__(self, client: StoreClient) -> None:
        self.client = client

    async def scores(
        self, target_type: TargetType, target_ids: Sequence[int]
    ) -> Dict[int, int]:
        if not target_ids:
            return {}
        try:
            rows = await self.client.select(
                "votes",
                {
                    "select": "target_id,value",
                    "target_type": f"eq.{target_type.value}",
                    "target_id": _in_filter(target_ids),
                },
            )
        except ProviderError as e:
            raise StoreError("vote_scores", str(e)) from e

        totals: Dict[int, int] = {}
        for row in rows:
            target_id = int(row["target_id"])
            totals[target_id] = totals.get(target_id, 0) + int(row["value"])
        return totals

    async def find_user_votes(
        self,
        session: SessionContext,
        target_type: TargetType,
        target_ids: Sequence[int],
    ) -> Dict[int, VoteValue]:
        if not target_ids:
            return {}
        try:
            rows = await self.client.select(
                "votes",
                {
                    "select": "target_id,value",
                    "user_id": f"eq.{session.user_id}",
                    "target_type": f"eq.{target_type.value}",
                    "target_id": _in_filter(target_ids),
                },
                session.access_token,
            )
        except ProviderError as e:
            raise StoreError("find_user_votes", str(e)) from e
        return {int(row["target_id"]): row_to_vote_value(row) for row in rows}

    async def upsert(
        self, session: SessionContext, target: VoteTarget, value: VoteValue
    ) -> None:
        try:
            await self.client.insert(
                "votes",
                {
                    "user_id": str(session.user_id),
                    "target_type": target.target_type.value,
                    "target_id": target.target_id,
                    "value": int(value),
                },
                session.access_token,
                on_conflict=VOTE_CONFLICT_COLUMNS,
            )
        except ProviderError as e:
            raise StoreError("upsert_vote", str(e)) from e

    async def delete(self, session: SessionContext, target: VoteTarget) -> None:
        try:
            await self.client.delete(
                "votes",
                {
                    "user_id": f"eq.{session.user_id}",
                    "target_type": f"eq.{target.target_type.value}",
                    "target_id": f"eq.{target.target_id}",
                },
                session.access_token,
            )
        except ProviderError as e:
            raise StoreError("delete_vote", str(e)) from e
