"""Command-line interface for Clip Content."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .classifier import ContentClassifier
from .config import DetectorConfig

logger = logging.getLogger(__name__)


def read_input(path: Optional[str]) -> str:
    """Read text from ``path``, or from stdin when path is None or '-'."""
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def run(
    content: str,
    classifier: ContentClassifier,
    show_formatted: bool = False,
    as_json: bool = False,
    show_votes: bool = False,
) -> str:
    """
    Classify ``content`` and render the report printed by the CLI.

    Args:
        content: Text to classify
        classifier: Classifier to use
        show_formatted: Append the formatted content
        as_json: Emit a JSON document instead of plain lines
        show_votes: Include every detector vote

    Returns:
        The report text
    """
    plan = classifier.build_render_plan(content)
    content_type = plan.detected.content_type
    votes = classifier.collect_votes(content) if show_votes and content.strip() else []

    if as_json:
        report = {
            "kind": content_type.kind.value,
            "confidence": round(content_type.confidence, 4),
            "language": plan.language,
            "highlight": plan.highlight,
            "low_confidence": plan.low_confidence,
            "preview": plan.detected.preview,
        }
        if show_votes:
            report["votes"] = {name: round(vote.confidence, 4) for name, vote in votes}
        if show_formatted:
            report["formatted"] = plan.formatted
        return json.dumps(report, indent=2, ensure_ascii=False)

    lines = [
        f"kind:       {content_type.kind.value}",
        f"confidence: {content_type.confidence:.2f}"
        + (" (low)" if plan.low_confidence else ""),
        f"language:   {plan.language}",
        f"highlight:  {'yes' if plan.highlight else 'no'}",
    ]
    for name, vote in votes:
        lines.append(f"vote:       {name} -> {vote.kind.value} {vote.confidence:.2f}")
    if show_formatted:
        lines.append("")
        lines.append(plan.formatted)
    return "\n".join(lines)


def cli(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for Clip Content."""
    parser = argparse.ArgumentParser(
        prog="clip-content",
        description="Classify clipboard text as JSON, code, Markdown, URLs, emails or plain text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify a file
  clip-content snippet.txt

  # Classify the clipboard (macOS) and show the pretty-printed result
  pbpaste | clip-content --format

  # Machine-readable output with every detector's vote
  clip-content payload.json --json --votes

Environment:
  CLIP_CONTENT_LANGUAGES          Comma-separated auto-detect grammars
  CLIP_CONTENT_DEFAULT_LANGUAGE   Fallback highlight grammar (default: javascript)
  CLIP_CONTENT_MAX_CHARS          Skip detection above this size (0 disables)
  CLIP_CONTENT_HIGHLIGHT_CUTOFF   Skip highlighting above this size
        """,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File to classify (default: read from stdin)",
    )
    parser.add_argument(
        "--format",
        "-f",
        action="store_true",
        help="Print the formatted content after the classification",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the result as JSON",
    )
    parser.add_argument(
        "--votes",
        action="store_true",
        help="Show every detector's vote",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = DetectorConfig.from_env()
        config.enable_cache = False
        content = read_input(args.path)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1

    classifier = ContentClassifier(config)
    print(run(content, classifier, show_formatted=args.format, as_json=args.json, show_votes=args.votes))
    return 0


if __name__ == "__main__":
    sys.exit(cli())
