"""
Best-effort decoding of model replies.

Replies are expected to be JSON objects, but models sometimes wrap them in
markdown fences or return something else entirely. A reply that cannot be
decoded yields the empty result for its operation instead of an error, so
every AI-derived field must be treated as optional by callers.
"""

import copy
import json
import logging
import re

from core.fields import clean_tags

logger = logging.getLogger(__name__)

RESULT_DEFAULTS = {
    "tag": {"tags": []},
    "explain": {
        "explanation": "",
        "complexity": "",
        "concepts": [],
        "suggestions": [],
    },
    "refactor": {
        "refactored": "",
        "improvements": [],
        "reasoning": "",
    },
    "commit": {
        "message": "",
        "type": "",
        "scope": "",
        "breaking": False,
    },
    "error_insight": {
        "explanation": "",
        "detectedLanguage": "",
        "detectedFramework": "",
        "possibleCauses": [],
        "solutions": [],
        "relatedDocs": [],
    },
}

_FENCE_START = re.compile(r"^```(?:json)?\s*")
_FENCE_END = re.compile(r"\s*```$")


def default_result(operation):
    return copy.deepcopy(RESULT_DEFAULTS[operation])


def decode_json(text):
    """Return the decoded payload, or None when the text is not JSON."""
    if not text or not text.strip():
        return None
    text = text.strip()
    if text.startswith("```"):
        text = _FENCE_END.sub("", _FENCE_START.sub("", text))
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        logger.warning("Could not decode model reply as JSON: %s", text[:200])
        return None


def _same_kind(value, default):
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, str):
        return isinstance(value, str)
    if isinstance(default, list):
        return isinstance(value, list)
    return True


def parse_result(operation, text):
    result = default_result(operation)
    payload = decode_json(text)
    if not isinstance(payload, dict):
        return result
    for key, default in result.items():
        value = payload.get(key)
        if value is not None and _same_kind(value, default):
            result[key] = value
    return result


def parse_tags(text):
    payload = decode_json(text)
    if isinstance(payload, dict):
        payload = payload.get("tags")
    if not isinstance(payload, list):
        return []
    return clean_tags([tag for tag in payload if isinstance(tag, str)], lowercase=True)


def parse_solutions(solutions):
    """Keep only well-formed solution objects from an error insight."""
    cleaned = []
    for item in solutions or []:
        if not isinstance(item, dict):
            continue
        steps = item.get("steps")
        cleaned.append(
            {
                "title": str(item.get("title") or ""),
                "steps": [str(step) for step in steps] if isinstance(steps, list) else [],
                "code": str(item.get("code") or ""),
                "reference": str(item.get("reference") or ""),
            }
        )
    return cleaned
