"""Client for the encoding.com video/image transcoding queue."""

from encoding_client.domain.errors import (
    AvailabilityError,
    EncodingError,
    LookupMissingError,
    MalformedResponseError,
    ServiceRejectedError,
)
from encoding_client.domain.models import MediaInfo, MediaListItem, MediaStatusReport
from encoding_client.formats import Format
from encoding_client.queue import Queue

__all__ = [
    'Queue',
    'Format',
    'MediaInfo',
    'MediaListItem',
    'MediaStatusReport',
    'EncodingError',
    'AvailabilityError',
    'ServiceRejectedError',
    'MalformedResponseError',
    'LookupMissingError',
]
