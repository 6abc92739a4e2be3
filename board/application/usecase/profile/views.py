"""Profile read model."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.domain.model import Profile


class ProfileView(BaseModel):
    """A profile as shown to the caller."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    display_name: Optional[str]
    label: str
    bio: Optional[str]
    created_at: Optional[datetime]

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileView":
        return cls(
            id=profile.id,
            display_name=profile.display_name,
            label=profile.label,
            bio=profile.bio,
            created_at=profile.created_at,
        )
