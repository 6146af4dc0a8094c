"""Classification orchestrator.

Runs every detector over the text, keeps the best-scoring vote and falls
back to plain text when no vote clears the acceptance threshold.
"""

import logging
from threading import RLock
from typing import List, Optional, Tuple

from .autodetect import LexicalAutoDetector
from .cache import ClassificationCache
from .config import ACCEPTANCE_THRESHOLD, LOW_CONFIDENCE_THRESHOLD, DetectorConfig
from .detectors import CodeDetector, Detector, build_detectors
from .detectors.code_detector import MIN_CODE_LENGTH
from .formatter import format_content
from .highlight import ORIGINAL_TYPE_DETECTORS, get_highlight_language
from .models import CodeDetails, ContentKind, ContentType, DetectedContent, RenderPlan

logger = logging.getLogger(__name__)

TEXT_FALLBACK = ContentType(ContentKind.TEXT, 1.0)

HIGHLIGHTED_KINDS = frozenset(
    {ContentKind.JSON, ContentKind.CODE, ContentKind.SQL, ContentKind.HTML, ContentKind.XML}
)


class ContentClassifier:
    """Classifies clipboard text into display content types."""

    def __init__(
        self,
        config: Optional[DetectorConfig] = None,
        auto_detector: Optional[LexicalAutoDetector] = None,
    ):
        """
        Initialize the classifier.

        Args:
            config: Classifier settings; defaults are used when omitted
            auto_detector: Lexical auto-detector for generic code; built from
                ``config.languages`` when omitted
        """
        self.config = config or DetectorConfig()
        self.auto_detector = auto_detector or LexicalAutoDetector(self.config.languages)
        self.detectors: List[Tuple[str, Detector]] = build_detectors(self.auto_detector)
        self.code_detector: CodeDetector = dict(self.detectors)["code"]

        if self.config.enable_cache:
            self.cache: Optional[ClassificationCache] = ClassificationCache(
                max_size=self.config.cache_max_size,
                max_age_seconds=self.config.cache_max_age_seconds,
            )
        else:
            self.cache = None

    def collect_votes(self, content: str) -> List[Tuple[str, ContentType]]:
        """
        Run every detector and collect the ones that voted.

        A detector that raises is logged and counted as abstaining.

        Args:
            content: Text to analyze

        Returns:
            (detector name, content type) pairs in detector order
        """
        votes = []
        for name, detector in self.detectors:
            try:
                result = detector(content)
            except Exception as e:
                logger.warning(f"Detector '{name}' failed, treating as no vote: {e}")
                continue
            if result is not None:
                votes.append((name, result))
        return votes

    def resolve(self, content: str) -> ContentType:
        """Pick the winning content type for non-empty ``content``."""
        votes = self.collect_votes(content)
        # sorted() is stable, so ties keep detector order
        ranked = sorted(votes, key=lambda vote: vote[1].confidence, reverse=True)

        if ranked and ranked[0][1].confidence > ACCEPTANCE_THRESHOLD:
            name, best = ranked[0]
            logger.debug(f"Classified by {name}: {best}")
            return best

        return TEXT_FALLBACK

    def classify(self, content: str) -> DetectedContent:
        """
        Classify a snapshot of clipboard text.

        Args:
            content: Text to classify; may be empty

        Returns:
            DetectedContent carrying the resolved type and a preview
        """
        if not content or not content.strip():
            return DetectedContent.build(content, TEXT_FALLBACK)

        max_chars = self.config.max_classify_chars
        if max_chars and len(content) > max_chars:
            logger.debug(f"Skipping detection for {len(content)} chars (limit {max_chars})")
            return DetectedContent.build(content, TEXT_FALLBACK)

        cacheable = self.cache is not None and len(content) <= self.config.cache_max_content_chars
        if cacheable:
            cached = self.cache.get(content)
            if cached is not None:
                return cached

        result = DetectedContent.build(content, self.resolve(content))

        if cacheable:
            self.cache.put(result)
        return result

    def _code_vote(self, content: str) -> Tuple[Optional[ContentType], Optional[str], float]:
        """Markup/SQL detectors first, then generic code: (vote, language, relevance)."""
        guess = self.code_detector.auto_detect(content)

        for kind, detector in ORIGINAL_TYPE_DETECTORS:
            result = detector(content)
            if result is not None:
                return result, kind.value, guess.relevance

        result = self.code_detector.evaluate(content, guess)
        language = guess.language
        if result is not None and language is None:
            language = self.config.default_language
        return result, language, guess.relevance

    def is_code_snippet(self, content: str) -> bool:
        """Whether ``content`` is confidently some kind of source code."""
        if not content or not content.strip():
            return False
        result, _, _ = self._code_vote(content)
        return result is not None and result.confidence > ACCEPTANCE_THRESHOLD

    def detect_code_with_details(self, content: str) -> CodeDetails:
        """
        Code verdict with the language and auto-detector relevance behind it.

        Args:
            content: Text to analyze

        Returns:
            CodeDetails; texts shorter than 10 characters are never code
        """
        if not content or len(content) < MIN_CODE_LENGTH:
            return CodeDetails(is_code=False, confidence=0.0)

        result, language, relevance = self._code_vote(content)
        confidence = result.confidence if result is not None else 0.0
        return CodeDetails(
            is_code=confidence > ACCEPTANCE_THRESHOLD,
            confidence=confidence,
            language=language,
            relevance=relevance,
        )

    def build_render_plan(self, content: str) -> RenderPlan:
        """
        Classify, format and pick a grammar for one record.

        Args:
            content: Text to display

        Returns:
            RenderPlan; ``highlight`` is False for plain kinds and for
            formatted text above the highlight cutoff
        """
        detected = self.classify(content)
        content_type = detected.content_type
        formatted = format_content(content, content_type)
        language = get_highlight_language(content, content_type, self.config.default_language)

        cutoff = self.config.highlight_cutoff_chars
        highlight = content_type.kind in HIGHLIGHTED_KINDS and len(formatted) <= cutoff

        return RenderPlan(
            detected=detected,
            formatted=formatted,
            language=language,
            highlight=highlight,
            low_confidence=content_type.confidence < LOW_CONFIDENCE_THRESHOLD,
        )


_default_classifier: Optional[ContentClassifier] = None
_default_lock = RLock()


def get_default_classifier() -> ContentClassifier:
    """Return the process-wide classifier, configured from the environment."""
    global _default_classifier
    if _default_classifier is not None:
        return _default_classifier

    with _default_lock:
        # Double-check after acquiring lock
        if _default_classifier is None:
            _default_classifier = ContentClassifier(DetectorConfig.from_env())
            logger.info("Initialized default content classifier")
    return _default_classifier


def classify(content: str) -> DetectedContent:
    """Classify ``content`` with the default classifier."""
    return get_default_classifier().classify(content)


def is_code_snippet(content: str) -> bool:
    return get_default_classifier().is_code_snippet(content)


def detect_code_with_details(content: str) -> CodeDetails:
    return get_default_classifier().detect_code_with_details(content)


def build_render_plan(content: str) -> RenderPlan:
    return get_default_classifier().build_render_plan(content)
