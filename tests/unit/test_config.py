"""Unit tests for classifier configuration."""

import pytest

from clip_content.config import (
    DEFAULT_LANGUAGES,
    MAX_CLASSIFY_CHARS,
    DetectorConfig,
)


class TestDetectorConfig:
    """Test DetectorConfig defaults and validation."""

    def test_defaults(self):
        config = DetectorConfig()
        assert config.languages == DEFAULT_LANGUAGES
        assert config.default_language == "javascript"
        assert config.max_classify_chars == MAX_CLASSIFY_CHARS
        assert config.enable_cache is True

    def test_languages_are_normalized(self):
        config = DetectorConfig(languages=(" Python", "SQL", "python", ""))
        assert config.languages == ("python", "sql")

    def test_languages_from_comma_string(self):
        config = DetectorConfig(languages="json, xml")
        assert config.languages == ("json", "xml")

    def test_empty_languages_rejected(self):
        with pytest.raises(ValueError, match="At least one"):
            DetectorConfig(languages=())

    def test_empty_default_language_rejected(self):
        with pytest.raises(ValueError):
            DetectorConfig(default_language="  ")

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError, match="max_classify_chars"):
            DetectorConfig(max_classify_chars=-1)

    def test_cache_size_must_be_positive(self):
        with pytest.raises(ValueError, match="cache_max_size"):
            DetectorConfig(cache_max_size=0)


class TestDetectorConfigFromEnv:
    """Test loading configuration from environment variables."""

    def test_from_env_defaults(self, monkeypatch):
        for name in (
            "CLIP_CONTENT_LANGUAGES",
            "CLIP_CONTENT_DEFAULT_LANGUAGE",
            "CLIP_CONTENT_MAX_CHARS",
            "CLIP_CONTENT_HIGHLIGHT_CUTOFF",
            "CLIP_CONTENT_CACHE",
            "CLIP_CONTENT_CACHE_SIZE",
            "CLIP_CONTENT_CACHE_TTL",
        ):
            monkeypatch.delenv(name, raising=False)

        assert DetectorConfig.from_env() == DetectorConfig()

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CLIP_CONTENT_LANGUAGES", "python,sql")
        monkeypatch.setenv("CLIP_CONTENT_DEFAULT_LANGUAGE", "Python")
        monkeypatch.setenv("CLIP_CONTENT_MAX_CHARS", "0")
        monkeypatch.setenv("CLIP_CONTENT_CACHE", "off")
        monkeypatch.setenv("CLIP_CONTENT_CACHE_SIZE", "10")

        config = DetectorConfig.from_env()
        assert config.languages == ("python", "sql")
        assert config.default_language == "python"
        assert config.max_classify_chars == 0
        assert config.enable_cache is False
        assert config.cache_max_size == 10

    def test_from_env_rejects_bad_integer(self, monkeypatch):
        monkeypatch.setenv("CLIP_CONTENT_MAX_CHARS", "lots")
        with pytest.raises(ValueError, match="CLIP_CONTENT_MAX_CHARS"):
            DetectorConfig.from_env()

    def test_from_env_rejects_bad_boolean(self, monkeypatch):
        monkeypatch.setenv("CLIP_CONTENT_CACHE", "maybe")
        with pytest.raises(ValueError, match="CLIP_CONTENT_CACHE"):
            DetectorConfig.from_env()
