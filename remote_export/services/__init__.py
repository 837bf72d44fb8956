"""Service helpers for the remote export destination."""

from .nested import PROPERTY_SEPARATOR, flatten_form_fields
from .response import (
    ScalarValue,
    ObjectValue,
    Unparseable,
    decode_response_body,
    extract_identifiers,
)

__all__ = [
    "PROPERTY_SEPARATOR",
    "flatten_form_fields",
    "ScalarValue",
    "ObjectValue",
    "Unparseable",
    "decode_response_body",
    "extract_identifiers",
]
