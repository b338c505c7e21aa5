import logging

from django.conf import settings
from openai import OpenAI

logger = logging.getLogger(__name__)


class GatewayError(RuntimeError):
    pass


def _get_client():
    api_key = getattr(settings, "OPENROUTER_API_KEY", None)
    base_url = getattr(settings, "OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
    if not api_key:
        return None
    return OpenAI(api_key=api_key, base_url=base_url)


def _client_or_raise():
    client = _get_client()
    if client is None:
        raise GatewayError("OpenRouter API key missing")
    return client


def _extract_text(completion):
    if not completion or not completion.choices:
        return ""
    message = completion.choices[0].message
    if message is None:
        return ""
    return message.content or ""


def chat(messages, response_format=None, model=None):
    """Send one chat completion and return the first choice's text."""
    client = _client_or_raise()
    model = model or getattr(settings, "OPENROUTER_DEFAULT_MODEL", "openai/gpt-4o-mini")
    kwargs = {"model": model, "messages": messages}
    if response_format:
        kwargs["response_format"] = response_format
    logger.debug("Chat completion request model=%s messages=%d", model, len(messages))
    completion = client.chat.completions.create(**kwargs)
    return _extract_text(completion)


def embed(text, model=None):
    client = _client_or_raise()
    model = model or getattr(settings, "OPENROUTER_EMBEDDING_MODEL", "openai/text-embedding-3-small")
    response = client.embeddings.create(model=model, input=text)
    if not response or not response.data:
        raise GatewayError("Embedding response was empty")
    return list(response.data[0].embedding)
