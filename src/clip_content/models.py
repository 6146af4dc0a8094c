"""Data models for content classification."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

PREVIEW_LENGTH = 200
PREVIEW_SUFFIX = "..."


class ContentKind(Enum):
    """Closed set of content categories the classifier can emit."""

    JSON = "json"
    XML = "xml"
    SQL = "sql"
    HTML = "html"
    MARKDOWN = "markdown"
    URL = "url"
    EMAIL = "email"
    CODE = "code"
    TEXT = "text"


@dataclass(frozen=True)
class ContentType:
    """A detected kind with its heuristic confidence score."""

    kind: ContentKind
    confidence: float

    def __repr__(self) -> str:
        return f"ContentType(kind={self.kind.value}, confidence={self.confidence:.2f})"


@dataclass(frozen=True)
class DetectedContent:
    """Classification result for one snapshot of text."""

    original: str
    content_type: ContentType
    preview: str

    @classmethod
    def build(cls, original: str, content_type: ContentType) -> "DetectedContent":
        """Create a result with the preview derived from ``original``."""
        return cls(original=original, content_type=content_type, preview=make_preview(original))


@dataclass(frozen=True)
class AutoDetectResult:
    """Best language guessed by the lexical auto-detector."""

    language: Optional[str]
    relevance: float = 0.0


@dataclass(frozen=True)
class CodeDetails:
    """Detailed answer to "is this text a code snippet?"."""

    is_code: bool
    confidence: float
    language: Optional[str] = None
    relevance: float = 0.0


@dataclass(frozen=True)
class RenderPlan:
    """Everything a rendering layer needs to display one record."""

    detected: DetectedContent
    formatted: str
    language: str
    highlight: bool
    low_confidence: bool


def make_preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Return the first ``length`` characters, with an ellipsis if truncated."""
    if len(text) > length:
        return text[:length] + PREVIEW_SUFFIX
    return text
