"""Concurrent classification must match sequential classification."""

from concurrent.futures import ThreadPoolExecutor

from clip_content.autodetect import LexicalAutoDetector
from clip_content.classifier import ContentClassifier
from clip_content.config import DetectorConfig

SAMPLES = [
    "",
    '{"a": 1, "b": [2,3]}',
    "SELECT * FROM users WHERE id = 1",
    "https://a.com\nhttps://b.com\nhttps://c.com",
    "alice@example.com\nbob@example.org",
    "# Title\n\n- one\n- two\n",
    "function add(a, b) {\n  return a + b;\n}",
    "<ul><li>One</li><li>Two</li></ul>",
    "Just a short note to self.",
]


class TestThreadSafety:
    """Test sharing one classifier between threads."""

    def test_concurrent_results_match_sequential(self):
        classifier = ContentClassifier(DetectorConfig())
        expected = [classifier.classify(sample).content_type for sample in SAMPLES]
        classifier.cache.clear()

        work = SAMPLES * 20
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(classifier.classify, work))

        assert [result.content_type for result in results] == expected * 20
        assert [result.original for result in results] == work

    def test_concurrent_render_plans(self):
        classifier = ContentClassifier(DetectorConfig(enable_cache=False))
        expected = [classifier.build_render_plan(sample) for sample in SAMPLES]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(classifier.build_render_plan, SAMPLES * 10))

        assert results == expected * 10

    def test_shared_auto_detector_without_locking(self):
        detector = LexicalAutoDetector()
        work = SAMPLES * 10
        expected = [detector.detect(sample) for sample in work]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(detector.detect, work))

        assert results == expected
