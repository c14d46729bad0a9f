import httpx
import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_groq import ChatGroq

import config
from agent import (
    ConfigurationError,
    ModelTimeoutError,
    build_llm,
    convert_to_langchain_messages,
    invoke_model,
    message_text,
)
from fakes import fake_llm, failing_llm
from schemas import ChatTurn


def test_build_llm_requires_groq_key(monkeypatch):
    monkeypatch.setattr(config, "GROQ_API_KEY", None)
    with pytest.raises(ConfigurationError, match="GROQ_API_KEY"):
        build_llm(0.7)


def test_build_llm_requires_gemini_key(monkeypatch):
    monkeypatch.setattr(config, "LLM_PROVIDER", "gemini")
    monkeypatch.setattr(config, "GEMINI_API_KEY", "")
    with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
        build_llm(0.7)


def test_build_llm_rejects_unknown_provider(monkeypatch):
    monkeypatch.setattr(config, "LLM_PROVIDER", "other")
    with pytest.raises(ConfigurationError, match="Unknown LLM_PROVIDER"):
        build_llm(0.7)


def test_build_llm_uses_groq_profile():
    llm = build_llm(0.2, 800)
    assert isinstance(llm, ChatGroq)
    assert llm.model_name == config.GROQ_MODEL_NAME
    assert llm.temperature == 0.2
    assert llm.max_tokens == 800
    assert llm.max_retries == 0
    assert llm.request_timeout == config.LLM_TIMEOUT_SECONDS


def test_convert_keeps_order_and_roles():
    converted = convert_to_langchain_messages([
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "I'm sad"},
        ChatTurn(role="assistant", content='{"foods": []}'),
        {"role": "tool", "content": "odd"},
        HumanMessage(content="again"),
    ])

    assert [type(m) for m in converted] == [SystemMessage, HumanMessage, AIMessage, HumanMessage, HumanMessage]
    assert [m.content for m in converted] == ["be brief", "I'm sad", '{"foods": []}', "odd", "again"]


def test_message_text_joins_content_parts():
    message = AIMessage(content=[{"type": "text", "text": '{"a"'}, {"type": "text", "text": ": 1}"}])
    assert message_text(message) == '{"a": 1}'


def test_invoke_model_returns_text():
    assert invoke_model(fake_llm("hello"), [HumanMessage(content="hi")]) == "hello"


@pytest.mark.parametrize("exc", [TimeoutError("slow"), httpx.ReadTimeout("slow")])
def test_invoke_model_reports_timeouts(exc):
    with pytest.raises(ModelTimeoutError, match="timed out"):
        invoke_model(failing_llm(exc), [HumanMessage(content="hi")])


def test_invoke_model_passes_other_errors_through():
    with pytest.raises(RuntimeError, match="rate limited"):
        invoke_model(failing_llm(RuntimeError("rate limited")), [HumanMessage(content="hi")])
