"""Unit tests for ToggleVoteUseCase."""

import pytest

from board.application.usecase.vote import ToggleVoteRequest, ToggleVoteUseCase
from board.domain.error import AuthenticationRequiredError, VoteUpdateError
from board.domain.value import TargetType, VoteDirection
from board.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_env_fixture, make_session, make_user

unit_env = create_env_fixture()


class TestToggleVoteUseCase:
    """Tests for ToggleVoteUseCase."""

    @pytest.mark.asyncio
    async def test_each_request_starts_from_store_state(self, unit_env):
        """Separate requests see earlier clicks through the store."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(ToggleVoteUseCase)
        session = make_session()
        for _ in range(5):
            store.votes[(make_user().id, "thread", 3)] = 1

        def click(direction: VoteDirection) -> ToggleVoteRequest:
            return ToggleVoteRequest(
                session=session,
                target_type=TargetType.THREAD,
                target_id=3,
                direction=direction,
            )

        # Act / Assert
        first = await use_case.execute(click(VoteDirection.UP))
        assert (first.score, first.current_vote) == (6, 1)

        second = await use_case.execute(click(VoteDirection.UP))
        assert (second.score, second.current_vote) == (5, 0)

        third = await use_case.execute(click(VoteDirection.DOWN))
        assert (third.score, third.current_vote) == (4, -1)

    @pytest.mark.asyncio
    async def test_response_uses_camel_case(self, unit_env):
        use_case = await unit_env.get(ToggleVoteUseCase)

        response = await use_case.execute(
            ToggleVoteRequest(
                session=make_session(),
                target_type=TargetType.COMMENT,
                target_id=9,
                direction=VoteDirection.DOWN,
            )
        )

        assert response.model_dump(by_alias=True, mode="json") == {
            "targetType": "comment",
            "targetId": 9,
            "score": -1,
            "currentVote": -1,
        }

    @pytest.mark.asyncio
    async def test_store_failure(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(ToggleVoteUseCase)
        store.failing.add("upsert_vote")

        with pytest.raises(VoteUpdateError):
            await use_case.execute(
                ToggleVoteRequest(
                    session=make_session(),
                    target_type=TargetType.THREAD,
                    target_id=1,
                    direction=VoteDirection.UP,
                )
            )

    @pytest.mark.asyncio
    async def test_signed_out_session(self, unit_env):
        use_case = await unit_env.get(ToggleVoteUseCase)
        session = make_session()
        session.sign_out()

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(
                ToggleVoteRequest(
                    session=session,
                    target_type=TargetType.THREAD,
                    target_id=1,
                    direction=VoteDirection.UP,
                )
            )
