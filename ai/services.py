import logging

from . import gateway
from .parsers import parse_result, parse_solutions, parse_tags
from .prompts import (
    commit_prompt,
    error_insight_prompt,
    explain_prompt,
    refactor_prompt,
    rewrite_prompt,
    summarize_prompt,
    tag_prompt,
    to_messages,
)

logger = logging.getLogger(__name__)


def _complete(prompt):
    return gateway.chat(to_messages(prompt), response_format=prompt.response_format)


def summarize(content):
    return {"summary": _complete(summarize_prompt(content))}


def rewrite(content, instruction=None):
    return {"rewritten": _complete(rewrite_prompt(content, instruction))}


def generate_tags(content):
    """Ask the model for tags. Blank content never reaches the model."""
    if not content or not str(content).strip():
        return []
    return parse_tags(_complete(tag_prompt(content)))


def explain_code(code, language=None, context=None):
    prompt = explain_prompt(code, language, context)
    return parse_result(prompt.operation, _complete(prompt))


def refactor_code(code, language, instruction=None):
    prompt = refactor_prompt(code, language, instruction)
    return parse_result(prompt.operation, _complete(prompt))


def commit_message(diff, style=None):
    prompt = commit_prompt(diff, style)
    return parse_result(prompt.operation, _complete(prompt))


def error_insight(error_text, context=None):
    prompt = error_insight_prompt(error_text, context)
    result = parse_result(prompt.operation, _complete(prompt))
    result["solutions"] = parse_solutions(result["solutions"])
    return result


def suggest_tags_or_empty(content):
    """Tag suggestion for background callers: failures are logged, never raised."""
    try:
        return generate_tags(content)
    except Exception:
        logger.exception("AI tag generation failed")
        return []
