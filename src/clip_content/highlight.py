"""Highlight grammar selection."""

import logging
from typing import Optional

from .config import DEFAULT_HIGHLIGHT_LANGUAGE
from .detectors import detect_html, detect_sql, detect_xml
from .models import ContentKind, ContentType

logger = logging.getLogger(__name__)

# Tried in this order inside the CODE bucket
ORIGINAL_TYPE_DETECTORS = (
    (ContentKind.SQL, detect_sql),
    (ContentKind.HTML, detect_html),
    (ContentKind.XML, detect_xml),
)

DIRECT_GRAMMARS = {
    ContentKind.JSON: "json",
    ContentKind.MARKDOWN: "markdown",
    ContentKind.SQL: "sql",
    ContentKind.HTML: "html",
    ContentKind.XML: "xml",
}


def detect_original_type(content: str) -> Optional[ContentKind]:
    """
    Recover the sub-type hidden behind the CODE bucket.

    Args:
        content: Text previously classified as code

    Returns:
        ContentKind.SQL, ContentKind.HTML or ContentKind.XML, or None
    """
    for kind, detector in ORIGINAL_TYPE_DETECTORS:
        if detector(content) is not None:
            return kind
    return None


def get_highlight_language(
    content: str,
    content_type: ContentType,
    default: str = DEFAULT_HIGHLIGHT_LANGUAGE,
) -> str:
    """
    Pick the grammar name to hand to a syntax highlighter.

    Args:
        content: The classified text
        content_type: Its resolved content type
        default: General-purpose grammar used when nothing specific applies

    Returns:
        A grammar name; never empty
    """
    kind = content_type.kind
    if kind in DIRECT_GRAMMARS:
        return DIRECT_GRAMMARS[kind]

    if kind is ContentKind.CODE:
        try:
            original = detect_original_type(content)
        except Exception as e:
            logger.warning(f"Original type detection failed: {e}")
            original = None
        if original is not None:
            return DIRECT_GRAMMARS[original]

    return default
