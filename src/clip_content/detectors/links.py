"""URL and email list detectors."""

import re
from typing import Optional, Pattern

from ..models import ContentKind, ContentType
from .common import non_blank_lines

URL_PATTERN = re.compile(r"https?://[^\s]+", re.IGNORECASE)
# Addresses start where a run of local-part characters starts
EMAIL_PATTERN = re.compile(r"(?<![a-zA-Z0-9._%+-])[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Share of non-blank lines a multi-item list must cover
LIST_COVERAGE = 0.7


def _detect_items(content: str, pattern: Pattern, kind: ContentKind) -> Optional[ContentType]:
    trimmed = content.strip()

    if pattern.fullmatch(trimmed):
        return ContentType(kind, 0.95)

    matches = pattern.findall(trimmed)
    lines = non_blank_lines(trimmed)
    if len(matches) >= 2 and len(matches) >= len(lines) * LIST_COVERAGE:
        return ContentType(kind, 0.85)

    return None


def detect_url(content: str) -> Optional[ContentType]:
    """Vote for a single URL or a list of URLs."""
    return _detect_items(content, URL_PATTERN, ContentKind.URL)


def detect_email(content: str) -> Optional[ContentType]:
    """Vote for a single email address or a list of addresses."""
    return _detect_items(content, EMAIL_PATTERN, ContentKind.EMAIL)
