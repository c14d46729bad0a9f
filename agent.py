import logging

import httpx
from groq import APITimeoutError
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_groq import ChatGroq

import config

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """A required setting, such as the provider API key, is missing or invalid."""


class ModelTimeoutError(TimeoutError):
    """The model did not answer within LLM_TIMEOUT_SECONDS."""


_TIMEOUT_ERRORS = (TimeoutError, httpx.TimeoutException, APITimeoutError)


def build_llm(temperature, max_tokens=None):
    """
    Create a chat model for the configured provider.

    Retries are disabled and every call is bounded by LLM_TIMEOUT_SECONDS.
    Raises ConfigurationError when the provider key is absent.
    """
    if config.LLM_PROVIDER == "gemini":
        if not config.GEMINI_API_KEY:
            raise ConfigurationError("Missing GEMINI_API_KEY in environment")
        return ChatGoogleGenerativeAI(
            model=config.GEMINI_MODEL_NAME,
            google_api_key=config.GEMINI_API_KEY,
            temperature=temperature,
            max_output_tokens=max_tokens,
            timeout=config.LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )
    elif config.LLM_PROVIDER == "groq":
        if not config.GROQ_API_KEY:
            raise ConfigurationError("Missing GROQ_API_KEY in environment")
        return ChatGroq(
            model=config.GROQ_MODEL_NAME,
            api_key=config.GROQ_API_KEY,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=config.LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )
    else:
        raise ConfigurationError(f"Unknown LLM_PROVIDER: {config.LLM_PROVIDER}")


def convert_to_langchain_messages(messages):
    """Turn role-tagged chat turns into LangChain messages, keeping their order."""
    converted = []
    for msg in messages:
        if isinstance(msg, BaseMessage):
            converted.append(msg)
            continue
        if not isinstance(msg, dict):
            msg = msg.model_dump()
        role = msg.get("role")
        content = msg.get("content", "")
        if role == "system":
            converted.append(SystemMessage(content=content))
        elif role == "assistant":
            converted.append(AIMessage(content=content))
        else:
            converted.append(HumanMessage(content=content))
    return converted


def message_text(message) -> str:
    content = message.content
    if isinstance(content, str):
        return content
    # Some providers return a list of content parts
    parts = []
    for part in content or []:
        if isinstance(part, dict):
            parts.append(part.get("text", ""))
        else:
            parts.append(str(part))
    return "".join(parts)


def invoke_model(llm, messages) -> str:
    """Call the model once and return its text. Timeouts raise ModelTimeoutError."""
    try:
        response = llm.invoke(messages)
    except _TIMEOUT_ERRORS as exc:
        logger.warning("Model call timed out after %ss", config.LLM_TIMEOUT_SECONDS)
        raise ModelTimeoutError(
            f"Model call timed out after {config.LLM_TIMEOUT_SECONDS}s"
        ) from exc
    return message_text(response)
