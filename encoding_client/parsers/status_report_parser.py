"""
Parser for GetStatus responses.

This module provides the StatusReportParser class which flattens the
status document of a single media item into a MediaStatusReport.

Note: A GetStatus document repeats ``status``, ``created``, ``started``
and friends inside every ``format`` section. The job-level status is the
first ``status`` in document order, and the timestamps are looked up by
their absolute ``response/...`` path so a per-format value can never
stand in for a missing job-level one.
"""

import xml.etree.ElementTree as ET

from encoding_client.domain.constants import (
    CREATED_PATH,
    DOWNLOADED_PATH,
    FINISHED_PATH,
    STARTED_PATH,
)
from encoding_client.domain.models import MediaStatusReport
from encoding_client.parsers.base_parser import BaseParser


class StatusReportParser(BaseParser):
    """Builds a MediaStatusReport from a GetStatus response document."""

    def parse(self, document: ET.Element) -> MediaStatusReport:
        """
        Extract the job-level status fields.

        Args:
            document: Parsed ``<response>`` root element

        Returns:
            MediaStatusReport with missing fields defaulted
        """
        return MediaStatusReport(
            source_file=self._get_text(document, 'sourcefile'),
            media_id=self._get_int(document, 'id'),
            status=self._get_first_text(document, 'status'),
            processor=self._get_text(document, 'processor'),
            time_left=self._get_int(document, 'time_left'),
            progress=self._get_int(document, 'progress'),
            file_size=self._get_int(document, 'filesize'),
            notify_url=self._get_text(document, 'notifyurl'),
            created=self._get_scoped_time(document, CREATED_PATH),
            started=self._get_scoped_time(document, STARTED_PATH),
            finished=self._get_scoped_time(document, FINISHED_PATH),
            downloaded=self._get_scoped_time(document, DOWNLOADED_PATH),
        )
