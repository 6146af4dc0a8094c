"""Markdown detector."""

import re
from typing import Optional

from ..models import ContentKind, ContentType

# Line-anchored patterns only match horizontal whitespace; bracket bodies end at
# the next bracket so unmatched openers cannot rescan the rest of the text
MARKDOWN_FEATURES = (
    re.compile(r"^#{1,6}[^\S\n]+.+$", re.MULTILINE),  # headers
    re.compile(r"\*\*[^*]+\*\*"),  # bold
    re.compile(r"\*[^*]+\*"),  # italic
    re.compile(r"`[^`]+`"),  # inline code
    re.compile(r"```[\s\S]*?```"),  # fenced code
    re.compile(r"^[^\S\n]*[*\-+][^\S\n]+", re.MULTILINE),  # unordered list
    re.compile(r"^[^\S\n]*\d+\.[^\S\n]+", re.MULTILINE),  # ordered list
    re.compile(r"^[^\S\n]*>[^\S\n]+", re.MULTILINE),  # blockquote
    re.compile(r"\[([^\[\]\n]+)\]\(([^)\[\]\n]+)\)"),  # link
    re.compile(r"!\[([^\[\]\n]*)\]\(([^)\[\]\n]+)\)"),  # image
    re.compile(r"^[^\S\n]*\|[^\n]*\|", re.MULTILINE),  # table
    re.compile(r"^[^\S\n]*-{3,}[^\S\n]*$", re.MULTILINE),  # horizontal rule
)

HEADER = re.compile(r"^#{1,6}[^\S\n]+", re.MULTILINE)
CODE_FENCE = re.compile(r"```")
LINK = re.compile(r"\[[^\[\]\n]*\]\([^)\[\]\n]*\)")
LIST_ITEM = re.compile(r"^[^\S\n]*[*\-+\d.][^\S\n]+", re.MULTILINE)


def detect_markdown(content: str) -> Optional[ContentType]:
    """Vote for Markdown on several features, or a header next to document structure."""
    feature_count = sum(1 for pattern in MARKDOWN_FEATURES if pattern.search(content))

    has_headers = bool(HEADER.search(content))
    has_structure = bool(
        CODE_FENCE.search(content) or LINK.search(content) or LIST_ITEM.search(content)
    )

    if feature_count >= 3 or (has_headers and has_structure):
        confidence = min(0.85, feature_count * 0.15 + (0.2 if has_headers else 0))
        return ContentType(ContentKind.MARKDOWN, confidence)
    return None
