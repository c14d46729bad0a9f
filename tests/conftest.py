import pytest

import config


@pytest.fixture(autouse=True)
def groq_settings(monkeypatch):
    monkeypatch.setattr(config, "LLM_PROVIDER", "groq")
    monkeypatch.setattr(config, "GROQ_API_KEY", "test-key")
