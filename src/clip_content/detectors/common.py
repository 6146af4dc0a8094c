"""Helpers shared by the content detectors."""

import re

from ..config import LARGE_CONTENT_CHARS

# Any opening or closing element tag; the body ends at the next angle bracket
TAG_PATTERN = re.compile(r"</?[a-zA-Z][a-zA-Z0-9]*(?:[^a-zA-Z0-9<>][^<>]*)?>")


def sample(text: str, limit: int) -> str:
    """Return the leading ``limit`` characters of large text, or the text itself."""
    if len(text) > LARGE_CONTENT_CHARS:
        return text[:limit]
    return text


def non_blank_lines(text: str):
    """Lines of ``text`` holding something other than whitespace."""
    return [line for line in text.split("\n") if line.strip()]
