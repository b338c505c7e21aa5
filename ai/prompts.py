"""
Prompt templates for the AI writing and developer tools.

Each builder validates its input, then returns a ``Prompt`` holding the system
instruction, the user instruction and the name of the result shape the reply
is parsed into (see ``ai.parsers.RESULT_DEFAULTS``).
"""

import json
from collections import namedtuple

Prompt = namedtuple("Prompt", ["operation", "system", "user", "response_format"])

JSON_OBJECT = {"type": "json_object"}

DEFAULT_COMMIT_STYLE = "conventional"

COMMIT_STYLES = {
    "conventional": (
        "Use Conventional Commits format: type(scope): description. "
        "Types: feat, fix, docs, style, refactor, test, chore"
    ),
    "semantic": "Use semantic commit format with clear, descriptive messages",
    "simple": "Keep it simple and straightforward",
}

RESPONSE_SCHEMAS = {
    "tag": {"tags": ["tag1", "tag2", "tag3"]},
    "explain": {
        "explanation": "detailed explanation",
        "complexity": "simple|moderate|complex",
        "concepts": ["concept1", "concept2"],
        "suggestions": ["suggestion1", "suggestion2"],
    },
    "refactor": {
        "refactored": "refactored code here",
        "improvements": ["improvement1", "improvement2"],
        "reasoning": "why these changes improve the code",
    },
    "commit": {
        "message": "the commit message",
        "type": "feat|fix|docs|style|refactor|test|chore",
        "scope": "optional scope",
        "breaking": False,
    },
    "error_insight": {
        "explanation": "what this error means",
        "detectedLanguage": "javascript|python|etc",
        "detectedFramework": "react|express|django|etc",
        "possibleCauses": ["cause1", "cause2"],
        "solutions": [
            {
                "title": "Solution title",
                "steps": ["step1", "step2"],
                "code": "example fix code",
                "reference": "documentation URL",
            }
        ],
        "relatedDocs": ["url1", "url2"],
    },
}


class MissingInputError(ValueError):
    """Raised when a request lacks the field an operation needs."""


def _require(value, message):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingInputError(message)
    return value


def _fenced(text, lang=""):
    return f"```{lang}\n{text}\n```"


def _with_schema(prompt, operation):
    schema = json.dumps(RESPONSE_SCHEMAS[operation], indent=2)
    return f"{prompt}\n\nRespond in JSON format:\n{schema}"


def summarize_prompt(content):
    _require(content, "Content is required")
    return Prompt(
        "summarize",
        "You are a helpful AI note summarizer. Create concise, clear summaries.",
        f"Summarize this note:\n{content}",
        None,
    )


def rewrite_prompt(content, instruction=None):
    _require(content, "Content is required")
    if instruction:
        user = f"Rewrite this note with the following instruction: {instruction}\n\nNote:\n{content}"
    else:
        user = f"Improve and rewrite this note to make it clearer and more professional:\n{content}"
    return Prompt(
        "rewrite",
        "You are a helpful AI writing assistant. Rewrite notes to improve clarity and professionalism.",
        user,
        None,
    )


def tag_prompt(content):
    _require(content, "Content is required")
    return Prompt(
        "tag",
        (
            "You are a helpful AI that extracts relevant tags from notes. "
            "Return 3-5 tags max, lowercase, single words or short phrases. "
            'Example: {"tags": ["work", "meeting", "project-alpha"]}'
        ),
        _with_schema(f"Extract tags from this note:\n{content}", "tag"),
        JSON_OBJECT,
    )


def explain_prompt(code, language=None, context=None):
    _require(code, "Code is required")
    subject = f"{language or 'code'} snippet"
    if context:
        subject += f" (Context: {context})"
    user = (
        f"Analyze and explain the following {subject}:\n\n"
        f"{_fenced(code, language or '')}\n\n"
        "Provide:\n"
        "1. A clear explanation of what the code does\n"
        "2. Complexity assessment (simple/moderate/complex)\n"
        "3. Key concepts used\n"
        "4. Suggestions for improvement (if any)"
    )
    return Prompt(
        "explain",
        "You are an expert code reviewer and educator. Explain code clearly and provide actionable insights.",
        _with_schema(user, "explain"),
        JSON_OBJECT,
    )


def refactor_prompt(code, language, instruction=None):
    if not code or not language:
        raise MissingInputError("Code and language are required")
    if instruction:
        user = f'Refactor this {language} code with the following instruction: "{instruction}"'
    else:
        user = f"Refactor and optimize this {language} code for better readability, performance, and maintainability:"
    user = (
        f"{user}\n\n{_fenced(code, language)}\n\n"
        "Provide:\n"
        "1. The refactored code\n"
        "2. List of improvements made\n"
        "3. Reasoning for changes"
    )
    return Prompt(
        "refactor",
        (
            "You are an expert software engineer specializing in code refactoring. "
            "Focus on clean code principles, performance, and maintainability."
        ),
        _with_schema(user, "refactor"),
        JSON_OBJECT,
    )


def commit_prompt(diff, style=None):
    _require(diff, "Diff is required")
    if style not in COMMIT_STYLES:
        style = DEFAULT_COMMIT_STYLE
    user = (
        "Generate a commit message for the following git diff:\n\n"
        f"{_fenced(diff, 'diff')}\n\n"
        f"Style: {style}\n{COMMIT_STYLES[style]}\n\n"
        "Provide:\n"
        "1. A clear commit message\n"
        "2. Commit type (feat, fix, docs, etc.)\n"
        "3. Scope (if applicable)\n"
        "4. Whether it's a breaking change"
    )
    return Prompt(
        "commit",
        (
            "You are an expert at writing clear, concise commit messages that follow best practices. "
            "Analyze code changes and generate meaningful commit messages."
        ),
        _with_schema(user, "commit"),
        JSON_OBJECT,
    )


def error_insight_prompt(error_text, context=None):
    _require(error_text, "Error text is required")
    context = context if isinstance(context, dict) else {}
    hints = ""
    if context.get("language"):
        hints += f"Language: {context['language']}\n"
    if context.get("framework"):
        hints += f"Framework: {context['framework']}\n"
    user = (
        "Analyze this error log and provide detailed insights:\n\n"
        f"{_fenced(error_text)}\n\n"
        f"{hints}"
        "Provide:\n"
        "1. Clear explanation of what the error means\n"
        "2. Detected language/framework (if not provided)\n"
        "3. Possible causes\n"
        "4. Detailed solutions with steps\n"
        "5. Related documentation links"
    )
    return Prompt(
        "error_insight",
        (
            "You are an expert debugging assistant with deep knowledge of programming languages, "
            "frameworks, and common error patterns. Provide clear, actionable solutions."
        ),
        _with_schema(user, "error_insight"),
        JSON_OBJECT,
    )


def to_messages(prompt):
    return [
        {"role": "system", "content": prompt.system},
        {"role": "user", "content": prompt.user},
    ]
