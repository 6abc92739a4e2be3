"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models mirror rows read from the store and are immutable.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


REMOVED_PLACEHOLDER = "[removed]"


def author_label(display_name: str | None, author_id: object | None) -> str:
    """Human-readable label for an author.

    Uses the display name when set, otherwise a stable pseudonym derived
    from the author id, otherwise ``anonymous`` (deleted account).
    """
    if display_name and display_name.strip():
        return display_name.strip()
    if author_id is not None:
        return f"user-{str(author_id)[:8]}"
    return "anonymous"
