"""Deterministic formatting of classified content."""

import json
import logging
import re

from .detectors.json_detector import parse_strict
from .highlight import detect_original_type
from .models import ContentKind, ContentType
from .repair import JSONRepairError, repair_json

logger = logging.getLogger(__name__)

JSON_INDENT = 2

# Keywords that start a new line; AND/OR are indented under their clause
SQL_BREAK = re.compile(
    r"(?<!\s)\s*\b(GROUP\s+BY|ORDER\s+BY|SELECT|FROM|WHERE|AND|OR|JOIN|LIMIT)\b",
    re.IGNORECASE,
)
SQL_INDENTED = {"AND", "OR"}


def format_json(content: str) -> str:
    """Re-indent JSON, repairing it first if needed; unchanged on failure."""
    try:
        parsed = parse_strict(content)
    except (ValueError, RecursionError):
        try:
            parsed = json.loads(repair_json(content))
        except (JSONRepairError, ValueError, RecursionError) as e:
            logger.debug(f"Leaving unparseable JSON unformatted: {e}")
            return content

    return json.dumps(parsed, indent=JSON_INDENT, ensure_ascii=False)


def _sql_break(match: "re.Match") -> str:
    keyword = re.sub(r"\s+", " ", match.group(1).upper())
    if keyword in SQL_INDENTED:
        return "\n  " + keyword
    return "\n" + keyword


def format_sql(content: str) -> str:
    """Put each major SQL clause on its own line."""
    return SQL_BREAK.sub(_sql_break, content).lstrip("\n")


def format_content(content: str, content_type: ContentType) -> str:
    """
    Pretty-print content according to its classification.

    Args:
        content: Text to format
        content_type: Resolved content type of ``content``

    Returns:
        Formatted text, or ``content`` unchanged when no formatting applies
    """
    try:
        if content_type.kind is ContentKind.JSON:
            return format_json(content)
        if content_type.kind is ContentKind.CODE and detect_original_type(content) is ContentKind.SQL:
            return format_sql(content)
    except Exception as e:
        logger.warning(f"Formatting failed, returning content unchanged: {e}")

    return content
