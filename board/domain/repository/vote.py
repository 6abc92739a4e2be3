"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Sequence

from board.domain.model import SessionContext
from board.domain.value import TargetType, VoteTarget, VoteValue


class VoteRepository(ABC):
    """Repository for votes.

    The store keeps at most one vote row per (user, target type, target id).
    A vote of ``VoteValue.NONE`` is represented by the absence of a row.
    """

    @abstractmethod
    async def scores(
        self, target_type: TargetType, target_ids: Sequence[int]
    ) -> Dict[int, int]:
        """Sum of vote values per target (batch query).

        Args:
            target_type: Type of targets
            target_ids: Target IDs to aggregate

        Returns:
            Mapping of target ID to score; targets without votes are omitted
        """
        pass

    @abstractmethod
    async def find_user_votes(
        self,
        session: SessionContext,
        target_type: TargetType,
        target_ids: Sequence[int],
    ) -> Dict[int, VoteValue]:
        """Find the session user's votes on multiple targets (batch query).

        Returns:
            Mapping of target ID to vote; targets without a vote are omitted
        """
        pass

    @abstractmethod
    async def upsert(
        self, session: SessionContext, target: VoteTarget, value: VoteValue
    ) -> None:
        """Create or overwrite the session user's vote on a target.

        Raises:
            StoreError: If the store rejects the call
        """
        pass

    @abstractmethod
    async def delete(self, session: SessionContext, target: VoteTarget) -> None:
        """Remove the session user's vote on a target, if any.

        Raises:
            StoreError: If the store rejects the call
        """
        pass
