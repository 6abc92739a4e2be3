"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error.

    Raised for transport failures and error responses from the store.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
