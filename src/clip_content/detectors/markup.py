"""Detectors for tag-based markup: XML and HTML.

Both resolve to the ``CODE`` bucket. The finer HTML/XML distinction is
recovered later by :func:`clip_content.highlight.detect_original_type`,
which reuses the tables defined here.
"""

import re
from typing import Optional

from ..config import MARKUP_SAMPLE_CHARS
from ..models import ContentKind, ContentType
from .common import TAG_PATTERN, sample

XML_DECLARATION = re.compile(r"""^<\?xml\s+version\s*=\s*["'][^"']*["'][^>]*\?>""", re.IGNORECASE)

# Tag bodies stop at the next '<', so an unclosed tag never rescans the rest of the text
XML_FEATURES = (
    re.compile(r"^<\?xml", re.IGNORECASE),  # declaration
    re.compile(r"</[a-zA-Z][a-zA-Z0-9:]*>"),  # closing tag
    re.compile(r"xmlns(?::[\w.-]+)?\s*=", re.IGNORECASE),  # namespace
    re.compile(r"<[a-zA-Z][a-zA-Z0-9:]*(?:[^a-zA-Z0-9:<>][^<>]*)?/>"),  # self-closing tag
    re.compile(r"<!\[CDATA\["),
)

XML_OPEN_TAG = re.compile(r"<[a-zA-Z][a-zA-Z0-9:]*(?:[^a-zA-Z0-9:<>/][^<>/]*)?>")
XML_CLOSE_TAG = re.compile(r"</[a-zA-Z][a-zA-Z0-9:]*>")

XML_COMMENT_OPEN = "<!--"
XML_COMMENT_CLOSE = "-->"

HTML_DOCUMENT_FEATURES = (
    re.compile(r"<!DOCTYPE\s+html", re.IGNORECASE),
    re.compile(r"<html[^<>]*>", re.IGNORECASE),
    re.compile(r"<head[^<>]*>", re.IGNORECASE),
    re.compile(r"<body[^<>]*>", re.IGNORECASE),
    re.compile(r"<title[^<>]*>", re.IGNORECASE),
)

COMMON_HTML_TAGS = ("div", "span", "p", "a", "img", "ul", "li", "table", "tr", "td")
COMMON_HTML_TAG_PATTERNS = tuple(
    re.compile(rf"</?{tag}[^<>]*>", re.IGNORECASE) for tag in COMMON_HTML_TAGS
)

TAG_DENSITY_THRESHOLD = 0.05


def _tag_density(text: str, tag_count: int) -> float:
    return tag_count / len(text) if text else 0.0


def has_xml_comment(text: str) -> bool:
    """Whether a comment opens somewhere and closes after it."""
    start = text.find(XML_COMMENT_OPEN)
    return start != -1 and text.find(XML_COMMENT_CLOSE, start + len(XML_COMMENT_OPEN)) != -1


def detect_xml(content: str) -> Optional[ContentType]:
    """Vote for XML on a declaration, XML-only constructs, or dense balanced tags."""
    text = sample(content.strip(), MARKUP_SAMPLE_CHARS)
    tags = TAG_PATTERN.findall(text)
    if len(tags) < 2:
        return None

    has_declaration = bool(XML_DECLARATION.search(text))
    feature_count = sum(1 for pattern in XML_FEATURES if pattern.search(text))
    feature_count += has_xml_comment(text)
    open_tags = len(XML_OPEN_TAG.findall(text))
    close_tags = len(XML_CLOSE_TAG.findall(text))
    balanced = abs(open_tags - close_tags) <= 1
    density = _tag_density(text, len(tags))

    if not (has_declaration or feature_count >= 2 or (density > TAG_DENSITY_THRESHOLD and balanced)):
        return None

    confidence = 0.6
    if has_declaration:
        confidence += 0.3
    if feature_count >= 2:
        confidence += 0.2
    if balanced:
        confidence += 0.1

    return ContentType(ContentKind.CODE, min(0.9, confidence))


def html_document_features(text: str) -> int:
    return sum(1 for pattern in HTML_DOCUMENT_FEATURES if pattern.search(text))


def common_html_tags(text: str) -> int:
    return sum(1 for pattern in COMMON_HTML_TAG_PATTERNS if pattern.search(text))


def detect_html(content: str) -> Optional[ContentType]:
    """Vote for HTML on document structure, tag density, or familiar tags."""
    text = sample(content.strip(), MARKUP_SAMPLE_CHARS)
    tags = TAG_PATTERN.findall(text)
    density = _tag_density(text, len(tags))
    document_features = html_document_features(text)
    common_tags = common_html_tags(text)

    if not (
        document_features >= 2
        or density > TAG_DENSITY_THRESHOLD
        or (len(tags) >= 3 and common_tags >= 2)
    ):
        return None

    confidence = min(0.9, document_features * 0.2 + density * 10 + common_tags * 0.1)
    return ContentType(ContentKind.CODE, confidence)
