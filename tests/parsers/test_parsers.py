"""Tests for parser modules."""

import xml.etree.ElementTree as ET
from datetime import datetime

from encoding_client.parsers.media_info_parser import MediaInfoParser
from encoding_client.parsers.media_list_parser import MediaListParser
from encoding_client.parsers.status_report_parser import StatusReportParser
from tests.conftest import FULL_STATUS_XML, MEDIA_INFO_XML, MEDIA_LIST_XML, NESTED_FIRST_STATUS_XML


def _doc(xml: str) -> ET.Element:
    return ET.fromstring(xml)


class TestStatusReportParser:
    """Tests for StatusReportParser."""

    def setup_method(self):
        self.parser = StatusReportParser()

    def test_parse_extracts_strings(self):
        report = self.parser.parse(_doc(FULL_STATUS_XML))
        assert report.source_file == 'http://example.com/source.avi'
        assert report.processor == 'AMAZON'
        assert report.notify_url == 'http://example.com/notify'

    def test_parse_extracts_integers(self):
        report = self.parser.parse(_doc(FULL_STATUS_XML))
        assert report.media_id == 4217
        assert report.file_size == 1048576
        assert report.time_left == 0

    def test_progress_uses_leading_integer(self):
        report = self.parser.parse(_doc(FULL_STATUS_XML))
        assert report.progress == 100

    def test_job_status_is_first_status(self):
        report = self.parser.parse(_doc(FULL_STATUS_XML))
        assert report.status == 'Finished'

    def test_first_status_in_document_order(self):
        report = self.parser.parse(_doc(NESTED_FIRST_STATUS_XML))
        assert report.status == 'Processing'

    def test_job_timestamps(self):
        report = self.parser.parse(_doc(FULL_STATUS_XML))
        assert report.created.replace(tzinfo=None) == datetime(2010, 6, 9, 12, 34, 56)
        assert report.started.replace(tzinfo=None) == datetime(2010, 6, 9, 12, 35, 10)
        assert report.finished.replace(tzinfo=None) == datetime(2010, 6, 9, 12, 40, 2)

    def test_zero_placeholder_timestamp_is_none(self):
        report = self.parser.parse(_doc(FULL_STATUS_XML))
        assert report.downloaded is None

    def test_nested_created_does_not_leak(self):
        report = self.parser.parse(_doc(NESTED_FIRST_STATUS_XML))
        assert report.created is None

    def test_empty_finished_is_none(self):
        report = self.parser.parse(_doc('<response><finished></finished></response>'))
        assert report.finished is None

    def test_missing_fields_default(self):
        report = self.parser.parse(_doc('<response/>'))
        assert report.source_file == ''
        assert report.media_id == 0
        assert report.status == ''
        assert report.progress == 0
        assert report.file_size == 0
        assert report.time_left == 0
        assert report.created is None

    def test_non_numeric_integer_is_zero(self):
        report = self.parser.parse(_doc('<response><id>abc</id><filesize>n/a</filesize></response>'))
        assert report.media_id == 0
        assert report.file_size == 0


class TestMediaListParser:
    """Tests for MediaListParser."""

    def setup_method(self):
        self.parser = MediaListParser()

    def test_one_item_per_media_node(self):
        items = self.parser.parse(_doc(MEDIA_LIST_XML))
        assert [item.media_id for item in items] == [101, 102]

    def test_item_fields(self):
        item = self.parser.parse(_doc(MEDIA_LIST_XML))[0]
        assert item.media_file == 'http://example.com/a.avi'
        assert item.media_status == 'Finished'
        assert item.create_date.replace(tzinfo=None) == datetime(2010, 6, 9, 12, 34, 56)
        assert item.finish_date.replace(tzinfo=None) == datetime(2010, 6, 9, 12, 40)

    def test_unset_dates_are_none(self):
        item = self.parser.parse(_doc(MEDIA_LIST_XML))[1]
        assert item.start_date is None
        assert item.finish_date is None

    def test_empty_list(self):
        assert self.parser.parse(_doc('<response/>')) == []

    def test_media_outside_response_ignored(self):
        assert self.parser.parse(_doc('<other><media><mediaid>1</mediaid></media></other>')) == []


class TestMediaInfoParser:
    """Tests for MediaInfoParser."""

    def setup_method(self):
        self.parser = MediaInfoParser()

    def test_parse_extracts_fields(self):
        info = self.parser.parse(_doc(MEDIA_INFO_XML))
        assert info.bitrate == '1807k'
        assert info.duration == 6464.83
        assert info.video_codec == 'mpeg4'
        assert info.frame_rate == 23.98
        assert info.audio_sample_rate == 48000
        assert info.audio_channels == 2
        assert info.display_aspect_ratio == '20:11'

    def test_dimensions(self):
        info = self.parser.parse(_doc(MEDIA_INFO_XML))
        assert info.dimensions == (640, 352)

    def test_missing_fields_default(self):
        info = self.parser.parse(_doc('<response/>'))
        assert info.duration == 0.0
        assert info.audio_channels == 0
        assert info.dimensions is None
