"""Profile and identity entities."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel, author_label
from board.domain.value import UserId


class AuthUser(DomainModel):
    """Identity resolved from an access token by the store's auth service."""

    id: UserId
    email: Optional[str] = None
    created_at: Optional[datetime] = None


class Profile(DomainModel):
    """Public profile of a member.

    A profile row may not exist yet for older accounts; callers render
    ``Profile.placeholder`` instead of failing.
    """

    id: UserId
    display_name: Optional[str] = Field(default=None, max_length=80)
    bio: Optional[str] = Field(default=None, max_length=1000)
    created_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return author_label(self.display_name, self.id)

    @classmethod
    def placeholder(cls, user_id: UserId) -> "Profile":
        return cls(id=user_id)
