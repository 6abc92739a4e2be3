"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class InvalidBodyError(InterfaceError):
    """Request body could not be read.

    The message is safe to return to the caller.
    """

    pass
