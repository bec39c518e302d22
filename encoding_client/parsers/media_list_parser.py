"""Parser for GetMediaList responses."""

import xml.etree.ElementTree as ET

from encoding_client.domain.constants import MEDIA_PATH
from encoding_client.domain.models import MediaListItem
from encoding_client.parsers.base_parser import BaseParser
from encoding_client.xml_paths import find_scoped


class MediaListParser(BaseParser):
    """Builds one MediaListItem per ``response/media`` node."""

    def parse(self, document: ET.Element) -> list[MediaListItem]:
        return [self.parse_item(node) for node in find_scoped(document, MEDIA_PATH)]

    def parse_item(self, node: ET.Element) -> MediaListItem:
        return MediaListItem(
            media_file=self._get_text(node, 'mediafile'),
            media_id=self._get_int(node, 'mediaid'),
            media_status=self._get_text(node, 'mediastatus'),
            create_date=self._get_time(node, 'createdate'),
            start_date=self._get_time(node, 'startdate'),
            finish_date=self._get_time(node, 'finishdate'),
        )
