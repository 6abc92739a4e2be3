"""Unit tests for vote reconciliation."""

import pytest

from board.domain.error import AuthenticationRequiredError, VoteUpdateError
from board.domain.model import SessionContext
from board.domain.service import VoteLedger, next_vote
from board.domain.value import VoteDirection, VoteTarget, VoteValue
from board.persistence.repository.inmemory import InMemoryStore, InMemoryVoteRepository
from tests.harness import make_user

THREAD = VoteTarget.thread(7)


def seed_score(store: InMemoryStore, target: VoteTarget, score: int) -> None:
    """Give a target ``score`` upvotes from other members."""
    for _ in range(score):
        store.votes[(make_user().id, target.target_type.value, target.target_id)] = 1


class TestNextVote:
    """Unit tests for the toggle rule."""

    @pytest.mark.parametrize(
        "current, direction, expected",
        [
            (VoteValue.NONE, VoteDirection.UP, VoteValue.UP),
            (VoteValue.NONE, VoteDirection.DOWN, VoteValue.DOWN),
            (VoteValue.UP, VoteDirection.UP, VoteValue.NONE),
            (VoteValue.DOWN, VoteDirection.DOWN, VoteValue.NONE),
            (VoteValue.UP, VoteDirection.DOWN, VoteValue.DOWN),
            (VoteValue.DOWN, VoteDirection.UP, VoteValue.UP),
        ],
    )
    def test_toggle_rule(self, current, direction, expected):
        assert next_vote(current, direction) == expected


class TestVoteLedger:
    """Unit tests for VoteLedger."""

    @pytest.mark.asyncio
    async def test_click_sequence_from_score_five(self, store, session):
        """Up, up again, then down: 6/+1, 5/0, 4/-1."""
        # Arrange
        seed_score(store, THREAD, 5)
        ledger = VoteLedger(InMemoryVoteRepository(store), session)
        await ledger.resync([THREAD])
        assert ledger.score(THREAD) == 5
        assert ledger.current_vote(THREAD) == VoteValue.NONE

        # Act / Assert
        assert await ledger.toggle(THREAD, VoteDirection.UP) == VoteValue.UP
        assert ledger.score(THREAD) == 6

        assert await ledger.toggle(THREAD, VoteDirection.UP) == VoteValue.NONE
        assert ledger.score(THREAD) == 5

        assert await ledger.toggle(THREAD, VoteDirection.DOWN) == VoteValue.DOWN
        assert ledger.score(THREAD) == 4

    @pytest.mark.asyncio
    async def test_store_matches_cache_after_toggles(self, store, session):
        repo = InMemoryVoteRepository(store)
        ledger = VoteLedger(repo, session)
        await ledger.resync([THREAD])

        await ledger.toggle(THREAD, VoteDirection.DOWN)

        key = (session.user_id, "thread", 7)
        assert store.votes[key] == -1
        assert (await repo.scores(THREAD.target_type, [7]))[7] == ledger.score(THREAD)

    @pytest.mark.asyncio
    async def test_double_click_restores_state(self, store, session):
        """Two clicks in the same direction leave vote and score unchanged."""
        seed_score(store, THREAD, 3)
        ledger = VoteLedger(InMemoryVoteRepository(store), session)
        await ledger.resync([THREAD])

        await ledger.toggle(THREAD, VoteDirection.DOWN)
        await ledger.toggle(THREAD, VoteDirection.DOWN)

        assert ledger.score(THREAD) == 3
        assert ledger.current_vote(THREAD) == VoteValue.NONE
        assert (session.user_id, "thread", 7) not in store.votes

    @pytest.mark.asyncio
    async def test_resync_picks_up_existing_vote(self, store, session):
        store.votes[(session.user_id, "thread", 7)] = -1
        ledger = VoteLedger(InMemoryVoteRepository(store), session)

        await ledger.resync([THREAD])

        assert ledger.current_vote(THREAD) == VoteValue.DOWN
        assert ledger.score(THREAD) == -1

    @pytest.mark.asyncio
    async def test_failed_write_leaves_cache_untouched(self, store, session):
        """A rejected upsert raises and changes neither vote nor score."""
        # Arrange
        seed_score(store, THREAD, 2)
        ledger = VoteLedger(InMemoryVoteRepository(store), session)
        await ledger.resync([THREAD])
        store.failing.add("upsert_vote")

        # Act
        with pytest.raises(VoteUpdateError) as exc_info:
            await ledger.toggle(THREAD, VoteDirection.UP)

        # Assert
        assert str(exc_info.value) == "Could not update your vote."
        assert ledger.score(THREAD) == 2
        assert ledger.current_vote(THREAD) == VoteValue.NONE

    @pytest.mark.asyncio
    async def test_anonymous_toggle_is_rejected(self, store):
        ledger = VoteLedger(InMemoryVoteRepository(store), None)

        with pytest.raises(AuthenticationRequiredError):
            await ledger.toggle(THREAD, VoteDirection.UP)

        assert store.votes == {}

    @pytest.mark.asyncio
    async def test_signed_out_session_is_rejected(self, store, session: SessionContext):
        ledger = VoteLedger(InMemoryVoteRepository(store), session)
        session.sign_out()

        with pytest.raises(AuthenticationRequiredError):
            await ledger.toggle(THREAD, VoteDirection.UP)

    @pytest.mark.asyncio
    async def test_closed_ledger_still_writes_but_does_not_update(self, store, session):
        ledger = VoteLedger(InMemoryVoteRepository(store), session)
        await ledger.resync([THREAD])
        ledger.close()

        result = await ledger.toggle(THREAD, VoteDirection.UP)

        assert result == VoteValue.UP
        assert store.votes[(session.user_id, "thread", 7)] == 1
        assert ledger.score(THREAD) == 0
        assert ledger.current_vote(THREAD) == VoteValue.NONE

    def test_hydrate_ignores_absent_votes(self, store, session):
        ledger = VoteLedger(InMemoryVoteRepository(store), session)
        comment = VoteTarget.comment(3)

        ledger.hydrate({THREAD: 4, comment: -2}, {THREAD: VoteValue.UP})

        assert ledger.score(THREAD) == 4
        assert ledger.score(comment) == -2
        assert ledger.current_vote(THREAD) == VoteValue.UP
        assert ledger.current_vote(comment) == VoteValue.NONE
