"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum

from pydantic import field_validator

from board.domain.value.common import RootValueObject, ValueObject


class TargetType(str, Enum):
    """Type of entity that can be voted on."""

    THREAD = "thread"
    COMMENT = "comment"


class VoteValue(IntEnum):
    """A user's vote on a single target.

    ``NONE`` is never stored: it is the absence of a vote row.
    """

    DOWN = -1
    NONE = 0
    UP = 1


class VoteDirection(IntEnum):
    """Direction of a vote click."""

    DOWN = -1
    UP = 1


class VoteTarget(ValueObject):
    """A thread or comment that can carry votes."""

    target_type: TargetType
    target_id: int

    @property
    def key(self) -> str:
        """Composite cache key, e.g. ``comment:42``."""
        return f"{self.target_type.value}:{self.target_id}"

    @classmethod
    def thread(cls, thread_id: int) -> "VoteTarget":
        return cls(target_type=TargetType.THREAD, target_id=thread_id)

    @classmethod
    def comment(cls, comment_id: int) -> "VoteTarget":
        return cls(target_type=TargetType.COMMENT, target_id=comment_id)


class InviteToken(RootValueObject[str]):
    """One-time invite token handed out by the organisers."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Trim and validate token is not empty."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v
