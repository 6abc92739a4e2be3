"""Toggle vote use case."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.application.usecase.base import BaseUseCase, SessionRequest
from board.domain.repository import VoteRepository
from board.domain.service import VoteLedger
from board.domain.value import TargetType, VoteDirection, VoteTarget


class ToggleVoteRequest(SessionRequest):
    """Toggle vote request."""

    target_type: TargetType
    target_id: int
    direction: VoteDirection


class ToggleVoteResponse(BaseModel):
    """Vote state after the toggle."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    target_type: TargetType
    target_id: int
    score: int
    current_vote: int


class ToggleVoteUseCase(BaseUseCase):
    """Use case for clicking up or down on a thread or comment.

    Each request gets its own ledger, seeded from the store, so the
    returned score is exact as of the toggle.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Toggle the vote.

        Raises:
            AuthenticationRequiredError: If the session has been signed out
            VoteUpdateError: If the store rejected the change
        """
        target = VoteTarget(
            target_type=request.target_type, target_id=request.target_id
        )
        ledger = VoteLedger(self.vote_repository, request.session)
        try:
            await ledger.resync([target])
            current = await ledger.toggle(target, request.direction)
            return ToggleVoteResponse(
                target_type=target.target_type,
                target_id=target.target_id,
                score=ledger.score(target),
                current_vote=int(current),
            )
        finally:
            ledger.close()
