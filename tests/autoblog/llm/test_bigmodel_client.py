from types import SimpleNamespace

import httpx
import openai
import pytest

from autoblog.llm.base import ProviderConfig
from autoblog.llm.bigmodel_client import SYSTEM_PROMPT, BigModelLLM, extract_chat_text
from autoblog.llm.errors import (
    MissingAPIKeyError,
    ProviderError,
    ProviderHTTPError,
    ProviderResponseError,
)


def _completion(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


class _Completions:
    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.exc is not None:
            raise self.exc
        return self.result


def _client(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def _cfg():
    return ProviderConfig(
        name="bigmodel",
        model="glm-4-flash",
        api_key_env="TEST_BIGMODEL_KEY",
        temperature=0.7,
        max_output_tokens=1024,
    )


def test_generate_text_sends_system_and_user_messages():
    completions = _Completions(result=_completion("## Markdown"))

    text = BigModelLLM(_cfg(), client=_client(completions)).generate_text("write")

    assert text == "## Markdown"
    assert completions.kwargs["model"] == "glm-4-flash"
    assert completions.kwargs["messages"] == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "write"},
    ]
    assert completions.kwargs["max_tokens"] == 1024


def test_missing_key_is_a_call_failure(monkeypatch):
    monkeypatch.delenv("TEST_BIGMODEL_KEY", raising=False)
    llm = BigModelLLM(_cfg())

    with pytest.raises(MissingAPIKeyError):
        llm.generate_text("write")


def test_client_built_from_env_key(monkeypatch):
    monkeypatch.setenv("TEST_BIGMODEL_KEY", "secret")
    built = {}

    class FakeOpenAI:
        def __init__(self, **kwargs):
            built.update(kwargs)
            self.chat = SimpleNamespace(completions=_Completions(result=_completion("ok")))

    monkeypatch.setattr("autoblog.llm.bigmodel_client.OpenAI", FakeOpenAI)

    assert BigModelLLM(_cfg()).generate_text("x") == "ok"
    assert built["api_key"] == "secret"
    assert built["base_url"] == "https://open.bigmodel.cn/api/paas/v4/"
    assert built["max_retries"] == 0


def test_status_error_becomes_http_error():
    request = httpx.Request("POST", "https://open.bigmodel.cn/api/paas/v4/chat/completions")
    response = httpx.Response(401, request=request)
    exc = openai.AuthenticationError("bad key", response=response, body=None)
    llm = BigModelLLM(_cfg(), client=_client(_Completions(exc=exc)))

    with pytest.raises(ProviderHTTPError) as ei:
        llm.generate_text("x")
    assert ei.value.status_code == 401
    assert "bad key" in str(ei.value)


def test_connection_error_is_wrapped():
    request = httpx.Request("POST", "https://open.bigmodel.cn/api/paas/v4/chat/completions")
    exc = openai.APIConnectionError(request=request)
    llm = BigModelLLM(_cfg(), client=_client(_Completions(exc=exc)))

    with pytest.raises(ProviderError) as ei:
        llm.generate_text("x")
    assert ei.value.provider == "bigmodel"


@pytest.mark.parametrize(
    "resp",
    [_completion(None), _completion("   "), SimpleNamespace(choices=[]), object()],
)
def test_extract_chat_text_rejects_malformed(resp):
    with pytest.raises(ProviderResponseError, match="Invalid BigModel response format"):
        extract_chat_text(resp)
