"""Shared data models used across the client modules."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Credentials:
    """encoding.com user id and secret key."""

    user_id: str
    user_key: str = field(repr=False)


@dataclass(frozen=True)
class HttpResponse:
    """What a transport hands back for a single POST."""

    status_code: int | str
    body: bytes | str = b''


@dataclass(frozen=True)
class MediaStatusReport:
    """Status snapshot of a single item in the encoding.com queue."""

    source_file: str = ''
    media_id: int = 0
    status: str = ''
    processor: str = ''
    time_left: int = 0
    progress: int = 0
    file_size: int = 0
    notify_url: str = ''
    created: datetime | None = None
    started: datetime | None = None
    finished: datetime | None = None
    downloaded: datetime | None = None


@dataclass(frozen=True)
class MediaListItem:
    """One entry of a GetMediaList response."""

    media_file: str = ''
    media_id: int = 0
    media_status: str = ''
    create_date: datetime | None = None
    start_date: datetime | None = None
    finish_date: datetime | None = None


@dataclass(frozen=True)
class MediaInfo:
    """Attributes of a source video as reported by GetMediaInfo."""

    bitrate: str = ''
    duration: float = 0.0
    video_codec: str = ''
    video_bitrate: str = ''
    frame_rate: float = 0.0
    size: str = ''
    pixel_aspect_ratio: str = ''
    display_aspect_ratio: str = ''
    audio_codec: str = ''
    audio_sample_rate: int = 0
    audio_channels: int = 0

    @property
    def dimensions(self) -> tuple[int, int] | None:
        """Return (width, height) parsed from ``size`` such as '640x352'."""
        width, sep, height = self.size.lower().partition('x')
        if not sep or not width.strip().isdigit() or not height.strip().isdigit():
            return None
        return int(width), int(height)
