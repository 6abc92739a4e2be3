"""Session context.

One ``SessionContext`` is built per request from the caller's bearer token
and passed explicitly to every store call that acts on the user's behalf.
"""

from dataclasses import dataclass, field

from board.domain.model.profile import AuthUser
from board.domain.value import UserId


@dataclass
class SessionContext:
    """The acting identity for one request.

    Lifecycle: hydrated by ``SessionService.authenticate``; ``sign_out``
    clears it, after which it can no longer act on the store.
    """

    user: AuthUser | None
    access_token: str | None = field(default=None, repr=False)

    @property
    def is_active(self) -> bool:
        return self.user is not None and bool(self.access_token)

    @property
    def user_id(self) -> UserId:
        if self.user is None:
            raise RuntimeError("Session has been signed out")
        return self.user.id

    def sign_out(self) -> None:
        self.user = None
        self.access_token = None
