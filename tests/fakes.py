from unittest.mock import MagicMock

from langchain_core.language_models import FakeListChatModel


def fake_llm(*responses):
    return FakeListChatModel(responses=list(responses))


def failing_llm(exc):
    llm = MagicMock()
    llm.invoke.side_effect = exc
    return llm
