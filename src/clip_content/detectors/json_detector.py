"""JSON detector."""

import json
import logging
import re
from typing import Optional

from ..config import JSON_REPAIR_MAX_CHARS, LARGE_CONTENT_CHARS
from ..models import ContentKind, ContentType
from ..repair import JSONRepairError, repair_json

logger = logging.getLogger(__name__)

JSON_FEATURES = (
    re.compile(r'"[^"]*"\s*:'),  # key
    re.compile(r':\s*"[^"]*"'),  # string value
    re.compile(r":\s*\d+"),  # number value
    re.compile(r":\s*(true|false|null)"),  # literal value
    re.compile(r"\[\s*\{"),  # array of objects
    re.compile(r"\}\s*,\s*\{"),  # consecutive objects
)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_strict(text: str):
    """Parse ``text`` as standard JSON, refusing NaN and Infinity."""
    return json.loads(text, parse_constant=_reject_constant)


def has_json_shape(trimmed: str) -> bool:
    """Whether trimmed text is wrapped in a matching brace or bracket pair."""
    return (trimmed.startswith("{") and trimmed.endswith("}")) or (
        trimmed.startswith("[") and trimmed.endswith("]")
    )


def detect_json(content: str) -> Optional[ContentType]:
    """Vote for JSON when the text is wrapped in braces and parses (or repairs)."""
    trimmed = content.strip()
    if not has_json_shape(trimmed):
        return None

    feature_count = sum(1 for pattern in JSON_FEATURES if pattern.search(trimmed))
    if feature_count < 2:
        return None

    # Large payloads are judged on their features alone
    if len(trimmed) > LARGE_CONTENT_CHARS:
        return ContentType(ContentKind.JSON, 0.8)

    try:
        parse_strict(trimmed)
        return ContentType(ContentKind.JSON, 0.95)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Strict JSON parse failed: {e}")

    if len(trimmed) > JSON_REPAIR_MAX_CHARS:
        return None

    try:
        repair_json(trimmed)
    except JSONRepairError as e:
        logger.debug(f"JSON repair failed: {e}")
        return None

    return ContentType(ContentKind.JSON, 0.8)
