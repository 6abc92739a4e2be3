"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when a bearer token is missing, malformed or not accepted.

    The message is safe to return to the caller.
    """

    pass


class AuthenticationRequiredError(DomainError):
    """Raised when an action needs a signed-in user and there is none."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Sign in required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action they are not permitted to take."""

    def __init__(self, action: str, user_id: str):
        self.action = action
        super().__init__(f"User {user_id} is not allowed to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreError(DomainError):
    """Raised when the external store rejects or fails a call.

    Carries the store's detail for logging only.
    """

    def __init__(self, operation: str, detail: str | None = None):
        self.operation = operation
        self.detail = detail
        message = f"Store call failed: {operation}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class VoteUpdateError(DomainError):
    """Raised when a vote toggle could not be persisted.

    Local vote state is left untouched; retrying is safe.
    """

    def __init__(self) -> None:
        super().__init__("Could not update your vote.")
