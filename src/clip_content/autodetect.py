"""Lexical language auto-detection backed by Pygments.

Each registered grammar tokenizes the text and earns relevance for the
tokens that only make sense in source code: keywords, declarations,
decorators, tags, preprocessor lines. Keywords that double as everyday
English words earn nothing (SQL keywords count only when written in
upper case), and every token a lexer cannot place costs a
point, so prose stays at a low relevance while real snippets climb quickly.
The best-scoring grammar wins; ties go to the grammar registered first.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.token import Comment, Error, Keyword, Name
from pygments.util import ClassNotFound

from .config import DEFAULT_LANGUAGES
from .models import AutoDetectResult

logger = logging.getLogger(__name__)

# Keywords that appear in ordinary sentences earn no relevance
COMMON_KEYWORDS = frozenset(
    {
        "of", "and", "for", "in", "not", "or", "if", "then", "parent", "list", "value",
        "a", "an", "as", "at", "by", "do", "is", "it", "no", "on", "to", "the",
        "all", "any", "case", "default", "each", "else", "first", "from", "group",
        "into", "last", "new", "open", "order", "over", "set", "some", "this",
        "time", "type", "when", "where", "while", "with", "year", "yes",
    }
)

TOKEN_WEIGHTS: Tuple[Tuple[object, float], ...] = (
    (Keyword, 1.0),
    (Name.Decorator, 1.0),
    (Name.Tag, 1.0),
    (Name.Function, 1.0),
    (Name.Class, 1.0),
    (Comment.Preproc, 1.0),
    (Comment.Hashbang, 1.0),
    (Name.Builtin, 0.5),
    (Name.Attribute, 0.5),
    (Comment, 0.5),
)

ILLEGAL_TOKEN_PENALTY = 1.0

# Case-insensitive grammars whose lower-case keywords read as English
UPPERCASE_KEYWORD_LANGUAGES = frozenset({"sql"})


def _token_weight(token_type, value: str) -> float:
    for parent, weight in TOKEN_WEIGHTS:
        if token_type in parent:
            word = value.strip().lower()
            if parent in (Keyword, Name.Builtin) and (len(word) < 3 or word in COMMON_KEYWORDS):
                return 0.0
            return weight
    return 0.0


class LexicalAutoDetector:
    """Guess the best-matching grammar from a restricted language set."""

    def __init__(self, languages: Iterable[str] = DEFAULT_LANGUAGES):
        """
        Initialize the detector.

        Args:
            languages: Grammar names to register, in tie-break order
        """
        self.lexers: Dict[str, Lexer] = {}

        for language in languages:
            try:
                # stripnl would shift indentation-sensitive tokens
                self.lexers[language] = get_lexer_by_name(language, stripnl=False)
            except ClassNotFound:
                logger.warning(f"No Pygments lexer for language '{language}', skipping")

        logger.debug(f"Registered auto-detect languages: {list(self.lexers)}")

    def get_supported_languages(self) -> List[str]:
        """Names of the grammars that were registered successfully."""
        return list(self.lexers)

    def relevance(self, language: str, content: str) -> float:
        """
        Score ``content`` against one registered grammar.

        Args:
            language: Registered grammar name
            content: Text to tokenize

        Returns:
            Relevance score, never negative; 0.0 for unknown grammars
        """
        lexer = self.lexers.get(language)
        if lexer is None:
            return 0.0

        uppercase_only = language in UPPERCASE_KEYWORD_LANGUAGES
        score = 0.0
        for token_type, value in lexer.get_tokens(content):
            if token_type in Error:
                score -= ILLEGAL_TOKEN_PENALTY
            elif uppercase_only and token_type in Keyword and value != value.upper():
                continue
            else:
                score += _token_weight(token_type, value)
        return max(0.0, score)

    def detect(self, content: str) -> AutoDetectResult:
        """
        Detect the best-matching registered grammar.

        Args:
            content: Text to analyze

        Returns:
            AutoDetectResult; ``language`` is None when no grammar scored
        """
        if not content or not content.strip():
            return AutoDetectResult(None, 0.0)

        best: Optional[str] = None
        best_relevance = 0.0
        for language in self.get_supported_languages():
            try:
                relevance = self.relevance(language, content)
            except Exception as e:
                logger.debug(f"Auto-detection failed for {language}: {e}")
                continue
            if relevance > best_relevance:
                best, best_relevance = language, relevance

        return AutoDetectResult(best, best_relevance)
