"""Parser for GetMediaInfo responses."""

import xml.etree.ElementTree as ET

from encoding_client.domain.models import MediaInfo
from encoding_client.parsers.base_parser import BaseParser


class MediaInfoParser(BaseParser):
    """
    Builds a MediaInfo from a GetMediaInfo response document.

    Bitrates keep their unit suffix ('1807k') since the service does not
    guarantee one; numeric fields are parsed from their leading digits.
    """

    def parse(self, document: ET.Element) -> MediaInfo:
        return MediaInfo(
            bitrate=self._get_text(document, 'bitrate'),
            duration=self._get_float(document, 'duration'),
            video_codec=self._get_text(document, 'video_codec'),
            video_bitrate=self._get_text(document, 'video_bitrate'),
            frame_rate=self._get_float(document, 'frame_rate'),
            size=self._get_text(document, 'size'),
            pixel_aspect_ratio=self._get_text(document, 'pixel_aspect_ratio'),
            display_aspect_ratio=self._get_text(document, 'display_aspect_ratio'),
            audio_codec=self._get_text(document, 'audio_codec'),
            audio_sample_rate=self._get_int(document, 'audio_sample_rate'),
            audio_channels=self._get_int(document, 'audio_channels'),
        )
