"""Lookup helpers over parsed encoding.com response documents.

ElementTree paths are always relative to an element, while the protocol
talks about absolute paths such as ``response/created``. These helpers
bridge the two and provide the lenient number parsing the service needs:
  - find_scoped(root, 'response/created')      → direct child of <response>
  - iter_nested(root, 'format', 'description') → //format//description
  - leading_int('1807k')                       → 1807
"""

import re
import xml.etree.ElementTree as ET
from typing import Iterator

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')
_LEADING_FLOAT = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def find_scoped(root: ET.Element, path: str) -> list[ET.Element]:
    """Find all elements matching an absolute path rooted at root's tag.

    Args:
        root: Document root element.
        path: Slash-separated path whose first step names the root element.

    Returns:
        Matching elements in document order; empty if the root tag differs.
    """
    head, _, rest = path.partition('/')
    if root.tag != head:
        return []
    if not rest:
        return [root]
    return root.findall(rest)


def iter_nested(root: ET.Element, ancestor: str, tag: str) -> Iterator[ET.Element]:
    """Yield every ``tag`` element that is a descendant of an ``ancestor`` element.

    Equivalent to the XPath ``//ancestor//tag``: document order, each
    element at most once even when ancestors nest.
    """
    yield from _iter_nested(root, ancestor, tag, root.tag == ancestor)


def _iter_nested(element: ET.Element, ancestor: str, tag: str, inside: bool) -> Iterator[ET.Element]:
    for child in element:
        if inside and child.tag == tag:
            yield child
        yield from _iter_nested(child, ancestor, tag, inside or child.tag == ancestor)


def text_of(element: ET.Element | None) -> str:
    """Return the full text content of element, '' when missing."""
    if element is None:
        return ''
    return ''.join(element.itertext())


def child_text(root: ET.Element, tag: str) -> str:
    """Text of the first direct child named tag, '' when missing."""
    return text_of(root.find(tag))


def leading_int(text: str | None) -> int:
    """Parse the integer prefix of text ('42 kb' → 42); 0 when there is none."""
    match = _LEADING_INT.match(text or '')
    return int(match.group(1)) if match else 0


def leading_float(text: str | None) -> float:
    """Parse the float prefix of text ('23.98 fps' → 23.98); 0.0 when there is none."""
    match = _LEADING_FLOAT.match(text or '')
    return float(match.group(1)) if match else 0.0
