"""Protocol constants for the encoding.com XML API."""

# Where encoding.com expects queries to be posted.
ENDPOINT = 'http://manage.encoding.com/'

# The only transport status treated as a delivered response.
SUCCESS_STATUS = '200'

# Name of the form field carrying the XML query.
QUERY_FIELD = 'xml'

DEFAULT_TIMEOUT = 30


class Action:
    """Action names understood by the service."""
    ADD_MEDIA = 'AddMedia'
    ADD_MEDIA_BENCHMARK = 'AddMediaBenchmark'
    GET_STATUS = 'GetStatus'
    GET_MEDIA_LIST = 'GetMediaList'
    GET_MEDIA_INFO = 'GetMediaInfo'
    CANCEL_MEDIA = 'CancelMedia'
    PROCESS_MEDIA = 'ProcessMedia'
    UPDATE_MEDIA = 'UpdateMedia'


# Absolute paths (rooted at the response element) for fields that also
# appear inside per-format sections.
ERROR_PATH = 'response/errors/error'
MEDIA_PATH = 'response/media'
CREATED_PATH = 'response/created'
STARTED_PATH = 'response/started'
FINISHED_PATH = 'response/finished'
DOWNLOADED_PATH = 'response/downloaded'
