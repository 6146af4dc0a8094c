"""Content detectors.

Every detector maps raw text to an optional :class:`ContentType`. Returning
None means "no vote"; detectors never raise for string input.
"""

from typing import Callable, List, Optional, Tuple

from ..autodetect import LexicalAutoDetector
from ..models import ContentType
from .code_detector import CodeDetector, looks_like_code
from .json_detector import detect_json
from .links import detect_email, detect_url
from .markdown_detector import detect_markdown
from .markup import detect_html, detect_xml
from .sql_detector import detect_sql

Detector = Callable[[str], Optional[ContentType]]


def build_detectors(auto_detector: LexicalAutoDetector) -> List[Tuple[str, Detector]]:
    """
    Build the detector list in priority order.

    Order only matters for ties: the earlier detector wins.

    Args:
        auto_detector: Auto-detector used by the generic code detector

    Returns:
        List of (name, detector) pairs
    """
    return [
        ("json", detect_json),
        ("xml", detect_xml),
        ("sql", detect_sql),
        ("html", detect_html),
        ("markdown", detect_markdown),
        ("url", detect_url),
        ("email", detect_email),
        ("code", CodeDetector(auto_detector)),
    ]


__all__ = [
    "Detector",
    "CodeDetector",
    "build_detectors",
    "detect_email",
    "detect_html",
    "detect_json",
    "detect_markdown",
    "detect_sql",
    "detect_url",
    "detect_xml",
    "looks_like_code",
]
