"""Configuration for clip-content-detector."""

import os
from dataclasses import dataclass
from typing import Tuple

# Classification results at or below this score fall back to plain text.
ACCEPTANCE_THRESHOLD = 0.5

# The rendering layer flags results below this score as uncertain.
LOW_CONFIDENCE_THRESHOLD = 0.8

# Size guards, in characters.
LARGE_CONTENT_CHARS = 50 * 1024
JSON_REPAIR_MAX_CHARS = 10 * 1024
MARKUP_SAMPLE_CHARS = 20 * 1024
CODE_SAMPLE_CHARS = 10 * 1024
MAX_CLASSIFY_CHARS = 500 * 1024
HIGHLIGHT_CUTOFF_CHARS = 50 * 1024

DEFAULT_LANGUAGES: Tuple[str, ...] = (
    "javascript",
    "typescript",
    "python",
    "json",
    "sql",
    "html",
    "xml",
)
DEFAULT_HIGHLIGHT_LANGUAGE = "javascript"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class DetectorConfig:
    """Configuration for the content classifier."""

    # Grammars registered with the lexical auto-detector
    languages: Tuple[str, ...] = DEFAULT_LANGUAGES
    # Grammar used when nothing more specific applies
    default_language: str = DEFAULT_HIGHLIGHT_LANGUAGE
    # Texts longer than this skip detection entirely (0 disables the guard)
    max_classify_chars: int = MAX_CLASSIFY_CHARS
    # Texts longer than this are rendered without highlighting
    highlight_cutoff_chars: int = HIGHLIGHT_CUTOFF_CHARS
    enable_cache: bool = True
    cache_max_size: int = 256
    cache_max_age_seconds: int = 3600
    # Texts longer than this are never cached
    cache_max_content_chars: int = 100 * 1024

    def __post_init__(self):
        """Validate and normalize settings."""
        self.languages = self.validate_languages(self.languages)
        self.default_language = self.default_language.strip().lower()
        if not self.default_language:
            raise ValueError("Default highlight language cannot be empty")

        for name in (
            "max_classify_chars",
            "highlight_cutoff_chars",
            "cache_max_content_chars",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.cache_max_size < 1:
            raise ValueError("cache_max_size must be at least 1")
        if self.cache_max_age_seconds < 1:
            raise ValueError("cache_max_age_seconds must be at least 1")

    @staticmethod
    def validate_languages(languages) -> Tuple[str, ...]:
        """
        Validate and normalize the auto-detect language set.

        Args:
            languages: Iterable of grammar names

        Returns:
            Lower-cased, de-duplicated names in their original order

        Raises:
            ValueError: If no language remains
        """
        if isinstance(languages, str):
            languages = languages.split(",")

        normalized = []
        for language in languages:
            name = language.strip().lower()
            if name and name not in normalized:
                normalized.append(name)

        if not normalized:
            raise ValueError("At least one auto-detect language is required")

        return tuple(normalized)

    @classmethod
    def from_env(cls) -> "DetectorConfig":
        """Create configuration from environment variables."""
        return cls(
            languages=os.getenv("CLIP_CONTENT_LANGUAGES", ",".join(DEFAULT_LANGUAGES)),
            default_language=os.getenv(
                "CLIP_CONTENT_DEFAULT_LANGUAGE", DEFAULT_HIGHLIGHT_LANGUAGE
            ),
            max_classify_chars=_env_int("CLIP_CONTENT_MAX_CHARS", MAX_CLASSIFY_CHARS),
            highlight_cutoff_chars=_env_int(
                "CLIP_CONTENT_HIGHLIGHT_CUTOFF", HIGHLIGHT_CUTOFF_CHARS
            ),
            enable_cache=_env_bool("CLIP_CONTENT_CACHE", True),
            cache_max_size=_env_int("CLIP_CONTENT_CACHE_SIZE", 256),
            cache_max_age_seconds=_env_int("CLIP_CONTENT_CACHE_TTL", 3600),
        )
