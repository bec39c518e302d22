"""
Transport abstraction for posting queries to encoding.com.

A transport owns everything about the HTTP exchange itself (timeouts,
TLS, proxies); the queue only asks it to POST a query and hand back the
status code and body.
"""

from abc import ABC, abstractmethod

from encoding_client.domain.models import HttpResponse


class Transport(ABC):
    """Abstract interface for delivering a query to the service."""

    @abstractmethod
    def post(self, url: str, body: bytes) -> HttpResponse:
        """POST the XML query to url. Non-200 statuses are returned, not raised."""
