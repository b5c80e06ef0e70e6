"""Exceptions raised by the payload."""


class PayloadError(Exception):
    """Base class for payload errors."""


class InvalidArgument(PayloadError, ValueError):
    """Raised when a field is given a value it cannot hold."""


class HostResolutionError(PayloadError):
    """Raised when the local hostname cannot be resolved."""

    def __init__(self, cause: Exception):
        super().__init__(f"Unable to resolve local hostname: {cause}")
        self.cause = cause
