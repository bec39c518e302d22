"""Base class for response document parsers."""

import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from encoding_client.time_parser import parse_time_node
from encoding_client.xml_paths import child_text, find_scoped, leading_float, leading_int, text_of


class BaseParser(ABC):
    """
    Common field extraction for encoding.com response parsers.

    Every accessor is defensive: a missing element yields '', 0, 0.0 or
    None instead of failing the whole parse.
    """

    @abstractmethod
    def parse(self, document: ET.Element) -> Any:
        """Map a parsed response document to a record."""

    def _get_text(self, element: ET.Element, tag: str) -> str:
        return child_text(element, tag)

    def _get_int(self, element: ET.Element, tag: str) -> int:
        return leading_int(child_text(element, tag))

    def _get_float(self, element: ET.Element, tag: str) -> float:
        return leading_float(child_text(element, tag))

    def _get_first_text(self, element: ET.Element, tag: str) -> str:
        """Text of the first ``tag`` anywhere below element, in document order."""
        return text_of(element.find(f'.//{tag}'))

    def _get_time(self, element: ET.Element, tag: str) -> datetime | None:
        return parse_time_node(element.findall(tag))

    def _get_scoped_time(self, document: ET.Element, path: str) -> datetime | None:
        return parse_time_node(find_scoped(document, path))
