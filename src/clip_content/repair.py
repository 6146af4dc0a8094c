"""Best-effort repair of near-valid JSON.

Clipboard JSON is often copied out of JavaScript or Python sources, so it
carries comments, single-quoted strings, unquoted keys, missing or trailing
commas, or brackets left open by a truncated copy. ``json_repair`` does the
rewriting; this module only decides whether its output counts as a repair.
"""

import json
import logging
import re

import json_repair

logger = logging.getLogger(__name__)

_EMPTY_CONTAINER = re.compile(r"^\s*(\{\s*\}|\[\s*\])\s*$")


class JSONRepairError(ValueError):
    """Raised when text cannot be turned into parseable JSON."""


def repair_json(text: str) -> str:
    """
    Rewrite near-valid JSON into strict JSON.

    Args:
        text: Candidate JSON text

    Returns:
        Repaired JSON text that ``json.loads`` accepts

    Raises:
        JSONRepairError: If no object or array can be recovered from the text
    """
    try:
        repaired = json_repair.repair_json(text, return_objects=True)
    except Exception as e:
        raise JSONRepairError(f"Could not repair JSON: {e}") from e

    if not isinstance(repaired, (dict, list)):
        raise JSONRepairError("Could not repair JSON: no object or array found")
    # An empty result from non-empty input means everything was discarded
    if not repaired and not _EMPTY_CONTAINER.match(text):
        raise JSONRepairError("Could not repair JSON: nothing recoverable")

    result = json.dumps(repaired, ensure_ascii=False)
    logger.debug(f"Repaired JSON ({len(text)} -> {len(result)} chars)")
    return result
