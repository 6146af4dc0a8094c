"""Generic source-code detector.

Combines three stages:

1. The lexical auto-detector's verdict, accepted outright when its
   relevance clears the bar (higher for very long text).
2. Structural heuristics: keywords, indentation, symbol density,
   call syntax and comment markers, vetoed when the text reads like prose.
3. A pattern check that rescues low-relevance auto-detections with at
   least two unmistakable declarations.
"""

import logging
import re
from typing import Optional

from ..autodetect import LexicalAutoDetector
from ..config import CODE_SAMPLE_CHARS
from ..models import AutoDetectResult, ContentKind, ContentType
from .common import sample

logger = logging.getLogger(__name__)

MIN_CODE_LENGTH = 10
VERY_LONG_CHARS = 1000
VERY_LONG_LINES = 20
MAX_INDENT_SCAN_LINES = 100

MIN_RELEVANCE = 5
MIN_RELEVANCE_VERY_LONG = 8
BONUS_RELEVANCE = 3
PATTERN_RELEVANCE = 2

CODE_KEYWORDS = (
    "function", "const", "let", "var", "return", "if", "else", "while",
    "for", "switch", "class", "import", "export", "def", "fn", "#include",
    "public", "private", "=>", "===", "!==", "new", "try", "catch",
    "interface", "extends", "implements", "async", "await", "typeof",
)

SYMBOL = re.compile(r"[{};=()\[\]]")
# Single-character anchors keep these searches linear on long words and runs
FUNCTION_CALL = re.compile(r"\w\s*\(")
COMMENT_MARKER = re.compile(r"//|/\*|\*/|#(?!\s*\w+\s*$)|<!--")

SENTENCE_BREAK = re.compile(r"[.!?]\s+[A-Z]")
CONTINUOUS_WORD = re.compile(r"\w{15,}")
STOP_WORD = re.compile(r"\b(the|and|or|but|in|on|at|to|for|of|with|by)\b", re.IGNORECASE)

CODE_PATTERNS = (
    re.compile(r"function\s+\w+\s*\("),
    re.compile(r"(const|let|var)\s+\w+\s*="),
    re.compile(r"\bif\s*\([^()]+\)\s*\{"),
    re.compile(r"import\s+\S.{0,200}?\sfrom"),
    re.compile(r"class\s+\w+"),
    re.compile(r"\w\.\w+\("),
)


def is_very_long(content: str) -> bool:
    """Long multi-line text gets a stricter acceptance bar."""
    return len(content) > VERY_LONG_CHARS and content.count("\n") + 1 > VERY_LONG_LINES


def looks_like_code(content: str) -> bool:
    """Heuristic verdict, independent of the auto-detector."""
    text = sample(content, CODE_SAMPLE_CHARS)
    lines = content.split("\n")

    score = sum(1 for keyword in CODE_KEYWORDS if keyword in text)
    indented = sum(
        1 for line in lines[:MAX_INDENT_SCAN_LINES] if line.startswith("  ") or line.startswith("\t")
    )
    symbols = len(SYMBOL.findall(text))
    density = symbols / len(text) if text else 0.0
    has_calls = bool(FUNCTION_CALL.search(text))
    has_comments = bool(COMMENT_MARKER.search(text))

    likely_code = (
        (score >= 2 and symbols > 0 and has_calls)
        or (indented >= 2 and len(lines) >= 3 and density > 0.01)
        or (has_comments and (score >= 1 or density > 0.005))
    )
    if not likely_code:
        return False

    likely_prose = (
        bool(SENTENCE_BREAK.search(text))
        and bool(CONTINUOUS_WORD.search(text))
        and bool(STOP_WORD.search(text))
        and density < 0.005
    )
    return not likely_prose


class CodeDetector:
    """Detector for generic source code, bridged to a lexical auto-detector."""

    def __init__(self, auto_detector: LexicalAutoDetector):
        self.auto_detector = auto_detector

    def auto_detect(self, content: str) -> AutoDetectResult:
        """Run the auto-detector on a bounded prefix, absorbing its failures."""
        try:
            # Lexers only ever see the prefix, whatever the total size
            return self.auto_detector.detect(content[:CODE_SAMPLE_CHARS])
        except Exception as e:
            logger.warning(f"Language auto-detection failed: {e}")
            return AutoDetectResult(None, 0.0)

    def evaluate(self, content: str, guess: AutoDetectResult) -> Optional[ContentType]:
        """Score ``content`` given an auto-detection result."""
        if not content or len(content) < MIN_CODE_LENGTH:
            return None

        language, relevance = guess.language, guess.relevance
        very_long = is_very_long(content)

        min_relevance = MIN_RELEVANCE_VERY_LONG if very_long else MIN_RELEVANCE
        if language and relevance >= min_relevance:
            return ContentType(ContentKind.CODE, min(0.9, relevance / 10))

        if looks_like_code(content):
            base = 0.6 if very_long else 0.75
            bonus = 0.15 if language and relevance >= BONUS_RELEVANCE else 0.0
            return ContentType(ContentKind.CODE, min(0.85, base + bonus))

        if language and relevance >= PATTERN_RELEVANCE:
            matches = sum(1 for pattern in CODE_PATTERNS if pattern.search(content))
            if matches >= 2:
                return ContentType(
                    ContentKind.CODE, min(0.8, 0.5 + matches * 0.1 + relevance / 20)
                )

        return None

    def __call__(self, content: str) -> Optional[ContentType]:
        if not content or len(content) < MIN_CODE_LENGTH:
            return None
        return self.evaluate(content, self.auto_detect(content))
