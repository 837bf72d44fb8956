"""Decoding of remote response bodies and identifier extraction."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..models.schema import FieldDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScalarValue:
    """A JSON string, number or ``true``."""
    value: Union[str, int, float, bool]


@dataclass(frozen=True)
class ObjectValue:
    """A JSON object."""
    value: Dict[str, Any]


@dataclass(frozen=True)
class Unparseable:
    """Anything else: invalid JSON, arrays, ``null`` or ``false``."""
    reason: str


ResponseBody = Union[ScalarValue, ObjectValue, Unparseable]


def decode_response_body(content: Optional[bytes]) -> ResponseBody:
    """
    Decode raw response bytes into a ResponseBody variant.

    Args:
        content: Raw response body

    Returns:
        ScalarValue, ObjectValue or Unparseable
    """
    if not content:
        return Unparseable("empty response body")

    try:
        parsed = json.loads(content)
    except ValueError as e:
        return Unparseable(f"invalid JSON: {e}")

    if isinstance(parsed, dict):
        return ObjectValue(parsed)
    if parsed is None or parsed is False:
        return Unparseable(f"unusable JSON value: {json.dumps(parsed)}")
    if isinstance(parsed, (str, int, float)):
        return ScalarValue(parsed)
    return Unparseable(f"unsupported JSON type: {type(parsed).__name__}")


def extract_identifiers(
    body: ResponseBody,
    expected_ids: Dict[str, FieldDefinition]
) -> Dict[str, Any]:
    """
    Project identifier values out of a decoded response.

    A scalar maps onto the single declared identifier. An object contributes
    the values of the keys it shares with ``expected_ids``, in declaration
    order.

    Returns:
        Identifier name -> value; empty when nothing could be extracted
    """
    if isinstance(body, ScalarValue):
        if len(expected_ids) == 1:
            return {next(iter(expected_ids)): body.value}
        logger.debug(
            f"Scalar response cannot fill {len(expected_ids)} identifiers"
        )
        return {}

    if isinstance(body, ObjectValue):
        return {
            name: body.value[name]
            for name in expected_ids
            if name in body.value
        }

    return {}
