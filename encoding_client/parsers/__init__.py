"""encoding.com response parsers."""

from encoding_client.parsers.base_parser import BaseParser
from encoding_client.parsers.media_info_parser import MediaInfoParser
from encoding_client.parsers.media_list_parser import MediaListParser
from encoding_client.parsers.status_report_parser import StatusReportParser

__all__ = [
    'BaseParser', 'MediaInfoParser', 'MediaListParser', 'StatusReportParser',
]
