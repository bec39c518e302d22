"""Domain models, constants and errors for the encoding.com client."""

from encoding_client.domain.errors import (
    AvailabilityError,
    EncodingError,
    LookupMissingError,
    MalformedResponseError,
    ServiceRejectedError,
)
from encoding_client.domain.models import (
    Credentials,
    HttpResponse,
    MediaInfo,
    MediaListItem,
    MediaStatusReport,
)

__all__ = [
    'AvailabilityError',
    'EncodingError',
    'LookupMissingError',
    'MalformedResponseError',
    'ServiceRejectedError',
    'Credentials',
    'HttpResponse',
    'MediaInfo',
    'MediaListItem',
    'MediaStatusReport',
]
