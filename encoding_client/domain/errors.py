"""Exception hierarchy for the encoding.com client."""


class EncodingError(Exception):
    """Base class for all errors raised by this package."""
    pass


class AvailabilityError(EncodingError):
    """The service (or the network path to it) did not answer with HTTP 200."""

    def __init__(self, status_code=None, message: str | None = None):
        self.status_code = status_code
        if message is None:
            message = f"encoding.com unavailable (HTTP {status_code})"
        super().__init__(message)


class ServiceRejectedError(EncodingError):
    """
    The request reached the service but the action was refused.

    Attributes:
        errors: The individual ``response/errors/error`` texts, in document order.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(', '.join(self.errors))


class MalformedResponseError(EncodingError):
    """The response body could not be parsed as XML."""
    pass


class LookupMissingError(EncodingError):
    """A single-element lookup found nothing."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No element matching {path} in response")
