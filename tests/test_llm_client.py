from types import SimpleNamespace

import pytest

from resume_maker import config, llm_client
from resume_maker.llm_client import LLMResponse, OllamaClient, OpenAIClient, get_llm_client


class FakeCompletions:
    def __init__(self, content):
        self.content = content
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def test_openai_client_requires_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        OpenAIClient()


def test_openai_client_sends_configured_params(monkeypatch):
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "123")
    monkeypatch.delenv("OPENAI_TEMPERATURE", raising=False)
    client = OpenAIClient(api_key="sk-test")
    completions = FakeCompletions("SKILLS:\n<span class=\"skill\">Go</span>")
    client.client = SimpleNamespace(chat=SimpleNamespace(completions=completions))

    rsp = client.chat("gpt-4o", [{"role": "user", "content": "hi"}])

    assert isinstance(rsp, LLMResponse)
    assert rsp.message.content.startswith("SKILLS:")
    assert completions.kwargs["model"] == "gpt-4o"
    assert completions.kwargs["max_tokens"] == 123
    assert completions.kwargs["temperature"] == 0.7
    assert completions.kwargs["messages"] == [{"role": "user", "content": "hi"}]


def test_openai_client_maps_null_content_to_empty(monkeypatch):
    client = OpenAIClient(api_key="sk-test")
    client.client = SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(None)))
    assert client.chat("gpt-4o", []).message.content == ""


def test_factory_picks_openai(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    assert isinstance(get_llm_client("openai"), OpenAIClient)


def test_factory_rejects_unknown_provider():
    with pytest.raises(ValueError, match="Unsupported LLM provider"):
        get_llm_client("carrier-pigeon")


def test_ollama_client_needs_package(monkeypatch):
    monkeypatch.setattr(llm_client, "ollama", None)
    with pytest.raises(ImportError):
        OllamaClient()


def test_ollama_client_chat(monkeypatch):
    class FakeOllamaClient:
        def __init__(self, host):
            self.host = host

        def chat(self, model, messages):
            return SimpleNamespace(message=SimpleNamespace(content=f"{model}:{len(messages)}"))

    monkeypatch.setattr(llm_client, "ollama", SimpleNamespace(Client=FakeOllamaClient))
    client = OllamaClient(host="http://ollama:11434")
    assert client.client.host == "http://ollama:11434"
    assert client.chat("llama3.1", [{}, {}]).message.content == "llama3.1:2"


def test_model_override(monkeypatch):
    monkeypatch.setattr(config, "RESUME_MODEL", None)
    assert config.get_model_for_provider("openai") == "gpt-4o"
    assert config.get_model_for_provider("ollama") == "llama3.1"
    monkeypatch.setattr(config, "RESUME_MODEL", "gpt-4o-mini")
    assert config.get_model_for_provider("openai") == "gpt-4o-mini"


@pytest.mark.parametrize("env, value", [("OPENAI_TEMPERATURE", "warm"), ("OPENAI_MAX_TOKENS", "2k")])
def test_bad_numeric_param_is_reported_at_client_creation(monkeypatch, env, value):
    monkeypatch.setenv(env, value)
    with pytest.raises(ValueError, match=env):
        OpenAIClient(api_key="sk-test")


def test_numeric_params_from_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.2")
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "")
    assert config.get_openai_params() == {"temperature": 0.2, "max_tokens": 2000}
