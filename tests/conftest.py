import copy

import pytest

from llm_client import LLMClient, LLMResponse
from sample_data import SAMPLE_RESUME


class FakeLLMClient(LLMClient):
    """Returns scripted replies in order, or raises when a reply is an exception."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def chat(self, model, messages, *, json_mode=False, temperature=0.7):
        self.calls.append({"model": model, "messages": messages, "json_mode": json_mode, "temperature": temperature})
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(reply)


@pytest.fixture(autouse=True)
def no_real_llm(monkeypatch):
    # Avoid accidental usage of real API keys during tests
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("LLM_PROVIDER", "openai")
    monkeypatch.delenv("RESUME_MODEL", raising=False)
    monkeypatch.delenv("RESUME_LLM_ENABLED", raising=False)


@pytest.fixture
def fake_llm():
    return FakeLLMClient


@pytest.fixture
def sample_resume():
    return copy.deepcopy(SAMPLE_RESUME)


@pytest.fixture
def scenario_b():
    return {
        "personalInfo": {"name": "Sam Lee"},
        "education": [{"college": "Tech U", "degree": "B.Sc."}],
        "skills": ["A", "B", "C"],
        "experience": [{"company": "Acme", "role": "Intern", "description": ["Built X", "Shipped Y"]}],
    }
