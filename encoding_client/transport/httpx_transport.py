"""Transport built on httpx."""

from __future__ import annotations

import httpx

from encoding_client.domain.constants import DEFAULT_TIMEOUT, QUERY_FIELD
from encoding_client.domain.errors import AvailabilityError
from encoding_client.domain.models import HttpResponse
from encoding_client.transport.base import Transport


class HttpxTransport(Transport):
    """
    Posts queries as an ``xml`` form field using a shared httpx.Client.

    The client is created once and reused for every call. Pass your own
    ``client`` to control proxies, TLS or connection limits.

    Example:
        with HttpxTransport(timeout=10) as http:
            queue = Queue(user_id, user_key, http=http)
            print(queue.status(4217))
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: httpx.Client | None = None):
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout))

    def post(self, url: str, body: bytes) -> HttpResponse:
        if isinstance(body, bytes):
            body = body.decode('utf-8')
        try:
            response = self._client.post(url, data={QUERY_FIELD: body})
        except httpx.TransportError as e:
            raise AvailabilityError(message=f"encoding.com not reachable at {url}: {e}") from e
        return HttpResponse(response.status_code, response.content)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
