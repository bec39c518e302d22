"""HTTP transports for the encoding.com queue."""

from encoding_client.transport.base import Transport
from encoding_client.transport.httpx_transport import HttpxTransport
from encoding_client.transport.urllib_transport import UrllibTransport

__all__ = ['Transport', 'HttpxTransport', 'UrllibTransport']
