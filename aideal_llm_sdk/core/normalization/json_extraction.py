"""
Best-effort recovery of a JSON payload from free-form model text.

Vendors without a native JSON mode tend to wrap their answer in markdown
fences or add a sentence around it. ``extract_json_payload`` applies an
ordered list of strategies; the first one that matches wins and the text is
returned untouched when none does.
"""

import json
import re
from typing import Callable, List, Optional

# ```json ... ```   (tag is case-insensitive and must end there, e.g. not ```jsonc)
_JSON_FENCE = re.compile(r"```json(?!\w)\s*\n?(.*?)\n?```", re.IGNORECASE | re.DOTALL)

# ```<any tag> ... ```
_ANY_FENCE = re.compile(r"```\w*\s*\n?(.*?)\n?```", re.DOTALL)


def looks_like_json(text: str) -> bool:
    """True when the text starts like a JSON object or array."""
    stripped = text.lstrip()
    return stripped.startswith("{") or stripped.startswith("[")


def is_valid_json(text: str) -> bool:
    try:
        json.loads(text)
    except (TypeError, ValueError):
        return False
    return True


def _already_json(text: str) -> Optional[str]:
    if looks_like_json(text):
        return text.strip()
    return None


def _json_tagged_fence(text: str) -> Optional[str]:
    match = _JSON_FENCE.search(text)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return None


def _first_parseable_fence(text: str) -> Optional[str]:
    for match in _ANY_FENCE.finditer(text):
        inner = match.group(1).strip()
        if looks_like_json(inner) and is_valid_json(inner):
            return inner
    return None


EXTRACTION_STRATEGIES: List[Callable[[str], Optional[str]]] = [
    _already_json,
    _json_tagged_fence,
    _first_parseable_fence,
]


def extract_json_payload(text: str) -> str:
    """
    Recover an embedded JSON payload from model output.

    Strategies, in order:
    1. text already starts with ``{`` or ``[``: returned trimmed
    2. first ```` ```json ```` fenced block: its inner text, trimmed
    3. first fenced block of any tag whose inner text parses as JSON

    Args:
        text: Raw model output

    Returns:
        The extracted payload, or ``text`` unchanged when no strategy matches.
    """
    if not text:
        return text

    for strategy in EXTRACTION_STRATEGIES:
        payload = strategy(text)
        if payload is not None:
            return payload

    return text
