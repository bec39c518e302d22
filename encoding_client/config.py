"""
Configuration for building a Queue from the environment.

Environment Variables:
    ENCODING_USER_ID: encoding.com user id (required)
    ENCODING_USER_KEY: encoding.com secret key (required)
    ENCODING_ENDPOINT: API endpoint (default: http://manage.encoding.com/)
    ENCODING_TIMEOUT: HTTP timeout in seconds (default: 30)
"""

import os
from dataclasses import dataclass, field
from typing import Mapping

from encoding_client.domain.constants import DEFAULT_TIMEOUT, ENDPOINT
from encoding_client.domain.errors import EncodingError
from encoding_client.queue import Queue
from encoding_client.transport.urllib_transport import UrllibTransport


class ConfigError(EncodingError):
    """Required configuration is missing or invalid."""
    pass


@dataclass
class QueueSettings:
    """Settings needed to talk to encoding.com."""

    user_id: str
    user_key: str = field(repr=False)
    endpoint: str = ENDPOINT
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'QueueSettings':
        env = os.environ if environ is None else environ
        user_id = env.get('ENCODING_USER_ID', '').strip()
        user_key = env.get('ENCODING_USER_KEY', '').strip()
        if not user_id or not user_key:
            raise ConfigError("ENCODING_USER_ID and ENCODING_USER_KEY must be set")

        raw_timeout = env.get('ENCODING_TIMEOUT', '').strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigError(f"ENCODING_TIMEOUT must be a number, got {raw_timeout!r}")

        return cls(
            user_id=user_id,
            user_key=user_key,
            endpoint=env.get('ENCODING_ENDPOINT', '').strip() or ENDPOINT,
            timeout=timeout,
        )


def build_queue(settings: QueueSettings) -> Queue:
    """Wire a Queue with a urllib transport using the given settings."""
    return Queue(
        settings.user_id,
        settings.user_key,
        http=UrllibTransport(timeout=settings.timeout),
        endpoint=settings.endpoint,
    )
