"""Clip Content - content-type classification for clipboard history."""

__version__ = "0.1.0"

from .autodetect import LexicalAutoDetector
from .cache import ClassificationCache
from .classifier import (
    ContentClassifier,
    build_render_plan,
    classify,
    detect_code_with_details,
    get_default_classifier,
    is_code_snippet,
)
from .config import ACCEPTANCE_THRESHOLD, DetectorConfig
from .formatter import format_content
from .highlight import detect_original_type, get_highlight_language
from .models import (
    AutoDetectResult,
    CodeDetails,
    ContentKind,
    ContentType,
    DetectedContent,
    RenderPlan,
)
from .repair import JSONRepairError, repair_json

__all__ = [
    "ACCEPTANCE_THRESHOLD",
    "AutoDetectResult",
    "ClassificationCache",
    "CodeDetails",
    "ContentClassifier",
    "ContentKind",
    "ContentType",
    "DetectedContent",
    "DetectorConfig",
    "JSONRepairError",
    "LexicalAutoDetector",
    "RenderPlan",
    "build_render_plan",
    "classify",
    "detect_code_with_details",
    "detect_original_type",
    "format_content",
    "get_default_classifier",
    "get_highlight_language",
    "is_code_snippet",
    "repair_json",
    "__version__",
]
