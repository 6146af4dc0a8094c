"""Shared pytest fixtures for all tests."""

import pytest

from clip_content.config import DetectorConfig
from clip_content.classifier import ContentClassifier
from clip_content.models import AutoDetectResult


class FakeAutoDetector:
    """Auto-detector stand-in returning a fixed guess."""

    def __init__(self, language=None, relevance=0.0, error=None):
        self.result = AutoDetectResult(language, relevance)
        self.error = error
        self.calls = []

    def detect(self, content):
        self.calls.append(content)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_auto_detector():
    """Factory for auto-detectors with a fixed verdict."""
    return FakeAutoDetector


@pytest.fixture
def config():
    """Configuration with caching disabled."""
    return DetectorConfig(enable_cache=False)


@pytest.fixture
def classifier(config):
    """Classifier backed by the real Pygments auto-detector."""
    return ContentClassifier(config)


@pytest.fixture
def silent_classifier(config):
    """Classifier whose auto-detector never recognises a language."""
    return ContentClassifier(config, auto_detector=FakeAutoDetector())


@pytest.fixture
def prose():
    """A paragraph of plain English with no code-like symbols."""
    return (
        "Morning light spread slowly across the quiet valley. Farmers walked toward "
        "distant fields carrying baskets of bread and cheese. Children laughed near "
        "the old stone bridge while dogs chased birds along the river bank. Later that "
        "afternoon heavy clouds gathered above the hills. Everyone hurried home before "
        "rain began falling softly on wooden roofs."
    )
