"""Thread domain service."""

from typing import Optional
from urllib.parse import urlsplit, urlunsplit

import logfire

from board.domain.error import NotFoundError, ValidationError
from board.domain.model import NewThread, SessionContext, Thread, ThreadSummary
from board.domain.repository import ThreadRepository
from board.domain.value import ThreadId

from .base import Service


def normalize_url(raw: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Normalise a link submitted with a thread.

    A missing scheme becomes ``https://``. The domain shown next to the
    title drops a leading ``www.``.

    Returns:
        Tuple of (url, domain), both None for a blank input

    Raises:
        ValidationError: If the URL cannot be parsed
    """
    if raw is None or not raw.strip():
        return None, None

    candidate = raw.strip()
    if not candidate.lower().startswith(("http://", "https://")):
        candidate = f"https://{candidate}"

    try:
        parts = urlsplit(candidate)
        hostname = parts.hostname
    except ValueError:
        hostname = None
    if not hostname or " " in candidate:
        raise ValidationError("The URL looks invalid. Please check it and try again.")

    domain = hostname[4:] if hostname.startswith("www.") else hostname
    return urlunsplit(parts._replace(path=parts.path or "/")), domain


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(
        self, thread_repository: ThreadRepository, title_max_length: int = 140
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            title_max_length: Longest accepted title
        """
        self.thread_repository = thread_repository
        self.title_max_length = title_max_length

    async def list_threads(self) -> list[ThreadSummary]:
        with logfire.span("thread_service.list_threads"):
            return await self.thread_repository.list_with_meta()

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Removed threads are returned; callers render them as removed.

        Raises:
            NotFoundError: If no thread has this ID
        """
        thread = await self.thread_repository.find_by_id(thread_id)
        if thread is None:
            raise NotFoundError("Thread", str(thread_id))
        return thread

    async def create_thread(
        self,
        session: SessionContext,
        title: str,
        body: str,
        url: Optional[str] = None,
        media_url: Optional[str] = None,
        media_mime_type: Optional[str] = None,
    ) -> Thread:
        """Create a thread.

        Title and body are trimmed and required.

        Raises:
            ValidationError: If input is missing or invalid
            StoreError: If the store rejected the insert
        """
        title = title.strip()
        body = body.strip()
        if not title or not body:
            raise ValidationError("Title and body are required.")
        if len(title) > self.title_max_length:
            raise ValidationError(
                f"Title must be {self.title_max_length} characters or fewer."
            )

        normalized_url, url_domain = normalize_url(url)

        with logfire.span("thread_service.create_thread", user_id=str(session.user_id)):
            thread = await self.thread_repository.create(
                session,
                NewThread(
                    title=title,
                    body=body,
                    url=normalized_url,
                    url_domain=url_domain,
                    media_url=media_url or None,
                    media_mime_type=media_mime_type if media_url else None,
                ),
            )
            logfire.info("Thread created", thread_id=thread.id)
            return thread

    async def delete_thread(self, session: SessionContext, thread_id: ThreadId) -> None:
        """Soft-delete a thread owned by the session user.

        Ownership is enforced by the store procedure.

        Raises:
            StoreError: If the store rejected the call
        """
        with logfire.span("thread_service.delete_thread", thread_id=thread_id):
            await self.thread_repository.soft_delete(session, thread_id)
            logfire.info("Thread deleted by owner", thread_id=thread_id)
