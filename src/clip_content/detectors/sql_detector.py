"""SQL detector.

Resolves to the ``CODE`` bucket; :func:`clip_content.highlight.detect_original_type`
re-runs it to pick the ``sql`` grammar and the SQL line-break formatter.
"""

import re
from typing import Optional

from ..config import MARKUP_SAMPLE_CHARS
from ..models import ContentKind, ContentType
from .common import sample

SQL_PATTERNS = (
    # Statement shapes, anchored at the start of the text
    re.compile(r"^SELECT\s+\S.*?\sFROM\s", re.IGNORECASE),
    re.compile(r"^INSERT\s+INTO\s+", re.IGNORECASE),
    re.compile(r"^UPDATE\s+\S.*?\sSET\s", re.IGNORECASE),
    re.compile(r"^DELETE\s+FROM\s+", re.IGNORECASE),
    re.compile(r"^CREATE\s+(TABLE|DATABASE|INDEX|VIEW)\s+", re.IGNORECASE),
    re.compile(r"^ALTER\s+TABLE\s+", re.IGNORECASE),
    re.compile(r"^DROP\s+(TABLE|DATABASE|INDEX|VIEW)\s+", re.IGNORECASE),
    # Clause shapes, anywhere
    re.compile(
        r"\bWHERE\s+[\w.]+\s*(=|<>|!=|<=|>=|<|>|\bLIKE\b|\bIN\b|\bIS\b|\bBETWEEN\b)",
        re.IGNORECASE,
    ),
    re.compile(r"\bJOIN\s+[\w.]+(\s+(AS\s+)?\w+)?\s+ON\s+", re.IGNORECASE),
    re.compile(r"\bGROUP\s+BY\s+[\w.]+", re.IGNORECASE),
    re.compile(r"\bORDER\s+BY\s+[\w.]+", re.IGNORECASE),
)

SQL_KEYWORDS = (
    "SELECT", "FROM", "WHERE", "INSERT", "UPDATE", "DELETE",
    "CREATE", "ALTER", "DROP", "JOIN", "INNER", "LEFT", "RIGHT",
    "GROUP BY", "ORDER BY", "HAVING", "LIMIT", "DISTINCT",
)


def sql_signals(text: str):
    """Return ``(structural_matches, keyword_hits)`` for ``text``."""
    matches = sum(1 for pattern in SQL_PATTERNS if pattern.search(text))
    upper = text.upper()
    hits = sum(1 for keyword in SQL_KEYWORDS if keyword in upper)
    return matches, hits


def detect_sql(content: str) -> Optional[ContentType]:
    """Vote for SQL on a statement shape or at least three SQL keywords."""
    text = sample(content.strip(), MARKUP_SAMPLE_CHARS)
    matches, hits = sql_signals(text)

    if matches >= 1 or hits >= 3:
        return ContentType(ContentKind.CODE, min(0.9, matches * 0.3 + hits * 0.1))
    return None
