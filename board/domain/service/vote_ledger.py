"""Vote reconciliation.

``VoteLedger`` holds the acting user's votes and the displayed scores for
the targets of one rendering context (a thread page, the thread list). A
toggle is only applied locally after the store confirms it, and the score
is then patched by the vote delta rather than re-summed.

Staleness: the cache is exact right after ``hydrate``/``resync``. Two
toggles on the same target in flight at once may each compute their delta
from the same starting vote, so the local score can drift until the next
resync. The store stays correct; only the cache drifts.
"""

from typing import Iterable, Mapping, Optional

import logfire

from board.domain.error import AuthenticationRequiredError, StoreError, VoteUpdateError
from board.domain.model import SessionContext
from board.domain.repository import VoteRepository
from board.domain.value import TargetType, VoteDirection, VoteTarget, VoteValue

from .base import Service


def next_vote(current: VoteValue, direction: VoteDirection) -> VoteValue:
    """Vote after clicking ``direction``.

    Clicking the direction already held clears the vote; any other click
    sets ``direction``, so a held downvote flips straight to an upvote.
    """
    if int(current) == int(direction):
        return VoteValue.NONE
    return VoteValue(int(direction))


class VoteLedger(Service):
    """Per-context cache of votes and scores, synchronised with the store."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        session: Optional[SessionContext] = None,
    ) -> None:
        """Initialize vote ledger.

        Args:
            vote_repository: Vote repository
            session: Acting session, None for anonymous readers
        """
        self.vote_repository = vote_repository
        self.session = session
        self._votes: dict[str, VoteValue] = {}
        self._scores: dict[str, int] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def current_vote(self, target: VoteTarget) -> VoteValue:
        return self._votes.get(target.key, VoteValue.NONE)

    def score(self, target: VoteTarget) -> int:
        return self._scores.get(target.key, 0)

    def hydrate(
        self,
        scores: Mapping[VoteTarget, int] | None = None,
        votes: Mapping[VoteTarget, VoteValue] | None = None,
    ) -> None:
        """Seed the cache from server-side aggregates.

        Args:
            scores: Score per target
            votes: Acting user's vote per target; absent means no vote
        """
        if self._closed:
            return
        for target, value in (scores or {}).items():
            self._scores[target.key] = int(value)
        for target, vote in (votes or {}).items():
            if vote == VoteValue.NONE:
                self._votes.pop(target.key, None)
            else:
                self._votes[target.key] = VoteValue(vote)

    async def resync(self, targets: Iterable[VoteTarget]) -> None:
        """Reload scores and the acting user's votes from the store.

        Args:
            targets: Targets to refresh
        """
        by_type: dict[TargetType, list[VoteTarget]] = {}
        for target in targets:
            by_type.setdefault(target.target_type, []).append(target)

        with logfire.span("vote_ledger.resync", targets=sum(map(len, by_type.values()))):
            scores: dict[VoteTarget, int] = {}
            votes: dict[VoteTarget, VoteValue] = {}
            for target_type, group in by_type.items():
                ids = [t.target_id for t in group]
                totals = await self.vote_repository.scores(target_type, ids)
                mine: dict[int, VoteValue] = {}
                if self.session is not None and self.session.is_active:
                    mine = await self.vote_repository.find_user_votes(
                        self.session, target_type, ids
                    )
                for target in group:
                    scores[target] = totals.get(target.target_id, 0)
                    votes[target] = mine.get(target.target_id, VoteValue.NONE)

            self.hydrate(scores, votes)

    async def toggle(self, target: VoteTarget, direction: VoteDirection) -> VoteValue:
        """Toggle the acting user's vote on a target.

        Args:
            target: Thread or comment being voted on
            direction: Clicked direction

        Returns:
            The vote now held on the target

        Raises:
            AuthenticationRequiredError: If there is no signed-in user
            VoteUpdateError: If the store rejected the change; nothing changed
        """
        if self.session is None or not self.session.is_active:
            raise AuthenticationRequiredError("vote")

        current = self.current_vote(target)
        next_value = next_vote(current, direction)

        with logfire.span(
            "vote_ledger.toggle",
            target=target.key,
            current=int(current),
            next=int(next_value),
        ):
            try:
                if next_value == VoteValue.NONE:
                    await self.vote_repository.delete(self.session, target)
                else:
                    await self.vote_repository.upsert(
                        self.session, target, next_value
                    )
            except StoreError as e:
                logfire.error(
                    "Failed to update vote",
                    target=target.key,
                    error=str(e),
                )
                raise VoteUpdateError() from e

            if self._closed:
                logfire.info("Vote confirmed after ledger closed", target=target.key)
                return next_value

            if next_value == VoteValue.NONE:
                self._votes.pop(target.key, None)
            else:
                self._votes[target.key] = next_value
            self._scores[target.key] = self.score(target) - int(current) + int(next_value)

            return next_value

    def close(self) -> None:
        """Stop applying completions; pending toggles still reach the store."""
        self._closed = True
