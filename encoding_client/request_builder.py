"""Serialization of encoding.com action queries."""

import re
import xml.etree.ElementTree as ET
from typing import Any, Callable

from encoding_client.domain.models import Credentials

PayloadWriter = Callable[[ET.Element], None]

# Unprefixed XML names; a colon would need a namespace declaration.
_TAG_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_.\-]*')
# Characters XML 1.0 cannot carry, even escaped.
_ILLEGAL_CHARS = re.compile('[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]')


def add_element(parent: ET.Element, tag: str, value: Any = None) -> ET.Element:
    """Append ``<tag>value</tag>`` to parent and return the new element.

    Booleans are written the way the service spells them ('yes'/'no').

    Raises:
        ValueError: If tag is not a valid element name or the text holds
            characters XML 1.0 does not allow
    """
    if not isinstance(tag, str) or not _TAG_PATTERN.fullmatch(tag):
        raise ValueError(f"invalid XML element name: {tag!r}")
    if isinstance(value, bool):
        text = 'yes' if value else 'no'
    elif value is not None:
        text = str(value)
        if _ILLEGAL_CHARS.search(text):
            raise ValueError(f"value for <{tag}> contains characters not allowed in XML")
    else:
        text = None
    element = ET.SubElement(parent, tag)
    element.text = text
    return element


def build_query(action: str, credentials: Credentials, payload: PayloadWriter | None = None) -> bytes:
    """
    Build the XML body for one action request.

    The header elements are always emitted first and in this order:
    ``userid``, ``userkey``, ``action``. Whatever the payload writer
    appends to the ``query`` element follows them.

    Args:
        action: Action name, e.g. 'GetStatus'
        credentials: encoding.com user id and key
        payload: Callable receiving the ``query`` element

    Returns:
        UTF-8 encoded XML document with declaration
    """
    query = ET.Element('query')
    add_element(query, 'userid', credentials.user_id)
    add_element(query, 'userkey', credentials.user_key)
    add_element(query, 'action', action)
    if payload is not None:
        payload(query)
    return ET.tostring(query, encoding='utf-8', xml_declaration=True)
