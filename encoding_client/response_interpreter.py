"""Interpretation of raw encoding.com HTTP responses."""

import logging
import xml.etree.ElementTree as ET

from encoding_client.domain.constants import ERROR_PATH, SUCCESS_STATUS
from encoding_client.domain.errors import (
    AvailabilityError,
    MalformedResponseError,
    ServiceRejectedError,
)
from encoding_client.xml_paths import find_scoped, text_of

logger = logging.getLogger(__name__)


def interpret(status_code: int | str, body: bytes | str) -> ET.Element:
    """
    Turn a transport response into a parsed response document.

    Args:
        status_code: HTTP status as returned by the transport (int or str)
        body: Raw response body

    Returns:
        The ``<response>`` root element

    Raises:
        AvailabilityError: status code is not 200; the body is not parsed
        MalformedResponseError: body is not well-formed XML
        ServiceRejectedError: the document carries ``response/errors/error`` entries
    """
    if str(status_code).strip() != SUCCESS_STATUS:
        logger.warning("encoding.com answered HTTP %s", status_code)
        raise AvailabilityError(status_code)

    try:
        document = ET.fromstring(body)
    except ET.ParseError as e:
        raise MalformedResponseError(f"Response is not well-formed XML: {e}") from e

    check_for_errors(document)
    return document


def check_for_errors(document: ET.Element) -> None:
    """Raise ServiceRejectedError if the document reports any errors."""
    errors = [text_of(e) for e in find_scoped(document, ERROR_PATH)]
    if errors:
        logger.warning("encoding.com rejected request: %s", ', '.join(errors))
        raise ServiceRejectedError(errors)
