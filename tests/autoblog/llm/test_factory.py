import pytest

from autoblog.llm import FallbackOrchestrator, LLMError, build_llm, build_orchestrator
from autoblog.llm.bigmodel_client import BigModelLLM
from autoblog.llm.gemini_client import GeminiLLM


def test_build_gemini_defaults():
    llm = build_llm(provider="Gemini ")
    assert isinstance(llm, GeminiLLM)
    assert llm.name == "gemini"
    assert llm.url.endswith("/models/gemini-2.0-flash:generateContent")


def test_build_gemini_model_override():
    llm = build_llm(provider="gemini", model="gemini-2.5-pro")
    assert llm.url.endswith("/models/gemini-2.5-pro:generateContent")


@pytest.mark.parametrize("name", ["bigmodel", "glm", "ZHIPU"])
def test_build_bigmodel_aliases(name):
    llm = build_llm(provider=name)
    assert isinstance(llm, BigModelLLM)
    assert llm.name == "bigmodel"


def test_unknown_provider_raises():
    with pytest.raises(LLMError, match="Unknown LLM provider: claude"):
        build_llm(provider="claude")


def test_build_orchestrator_from_config():
    orch = build_orchestrator()
    assert isinstance(orch, FallbackOrchestrator)
    assert orch.primary.name == "gemini"
    assert orch.secondary.name == "bigmodel"


def test_build_orchestrator_swapped_roles():
    orch = build_orchestrator(primary="bigmodel", secondary="gemini")
    assert orch.primary.name == "bigmodel"
    assert orch.secondary.name == "gemini"
