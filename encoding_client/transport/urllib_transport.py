"""Transport built on the standard library's urllib."""

from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from encoding_client.domain.constants import DEFAULT_TIMEOUT, QUERY_FIELD
from encoding_client.domain.errors import AvailabilityError
from encoding_client.domain.models import HttpResponse
from encoding_client.transport.base import Transport


class UrllibTransport(Transport):
    """Posts queries as an ``xml`` form field using urllib.request."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self._timeout = timeout

    def _encode(self, body: bytes) -> bytes:
        if isinstance(body, bytes):
            body = body.decode('utf-8')
        return urlencode({QUERY_FIELD: body}).encode('ascii')

    def post(self, url: str, body: bytes) -> HttpResponse:
        req = Request(
            url,
            data=self._encode(body),
            headers={'Content-Type': 'application/x-www-form-urlencoded'},
            method='POST',
        )
        try:
            with urlopen(req, timeout=self._timeout) as resp:
                return HttpResponse(resp.status, resp.read())
        except HTTPError as e:
            return HttpResponse(e.code, e.read())
        except URLError as e:
            raise AvailabilityError(message=f"encoding.com not reachable at {url}: {e.reason}") from e
        except (HTTPException, OSError) as e:
            raise AvailabilityError(message=f"encoding.com connection to {url} failed: {e!r}") from e
