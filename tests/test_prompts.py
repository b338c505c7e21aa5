import json

import pytest

from ai import prompts
from ai.prompts import MissingInputError


class TestCommitPrompt:
    def test_defaults_to_conventional_style(self):
        prompt = prompts.commit_prompt("diff --git a/x b/x")
        assert "Style: conventional" in prompt.user
        assert prompts.COMMIT_STYLES["conventional"] in prompt.user

    def test_unknown_style_falls_back_to_conventional(self):
        prompt = prompts.commit_prompt("diff --git a/x b/x", style="haiku")
        assert "Style: conventional" in prompt.user

    @pytest.mark.parametrize("style", ["semantic", "simple"])
    def test_named_styles(self, style):
        prompt = prompts.commit_prompt("+ added line", style=style)
        assert f"Style: {style}" in prompt.user
        assert prompts.COMMIT_STYLES[style] in prompt.user

    def test_diff_is_fenced(self):
        prompt = prompts.commit_prompt("+ added line")
        assert "```diff\n+ added line\n```" in prompt.user

    def test_requests_json_object(self):
        prompt = prompts.commit_prompt("+ added line")
        assert prompt.response_format == {"type": "json_object"}
        assert "Respond in JSON format:" in prompt.user


class TestRequiredFields:
    @pytest.mark.parametrize(
        "builder, args, message",
        [
            (prompts.summarize_prompt, ("",), "Content is required"),
            (prompts.rewrite_prompt, (None,), "Content is required"),
            (prompts.tag_prompt, ("   ",), "Content is required"),
            (prompts.explain_prompt, ("",), "Code is required"),
            (prompts.refactor_prompt, ("x = 1", ""), "Code and language are required"),
            (prompts.commit_prompt, ("",), "Diff is required"),
            (prompts.error_insight_prompt, (None,), "Error text is required"),
        ],
    )
    def test_missing_input_raises(self, builder, args, message):
        with pytest.raises(MissingInputError, match=message):
            builder(*args)


def test_rewrite_uses_instruction_when_given():
    prompt = prompts.rewrite_prompt("meeting notes", instruction="make it a bullet list")
    assert "make it a bullet list" in prompt.user
    assert prompt.response_format is None


def test_refactor_embeds_code_in_language_fence():
    prompt = prompts.refactor_prompt("def f(): pass", "python")
    assert "```python\ndef f(): pass\n```" in prompt.user


def test_error_insight_includes_context_hints():
    prompt = prompts.error_insight_prompt("KeyError: 'id'", {"language": "python", "framework": "django"})
    assert "Language: python" in prompt.user
    assert "Framework: django" in prompt.user


def test_schema_is_valid_json():
    prompt = prompts.explain_prompt("print(1)", "python")
    schema = prompt.user.split("Respond in JSON format:\n", 1)[1]
    assert set(json.loads(schema)) == {"explanation", "complexity", "concepts", "suggestions"}


def test_to_messages_orders_system_first():
    messages = prompts.to_messages(prompts.summarize_prompt("hello"))
    assert [m["role"] for m in messages] == ["system", "user"]
