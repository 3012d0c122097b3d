"""
LLM client abstraction layer to support multiple providers.

This module provides a unified interface for different LLM providers so the
grading, rendering and suggestion strategies can talk to OpenAI or a local
Ollama server through the same call. `get_llm_client()` returns None when no
provider is usable; callers then stay on the rule-based path.
"""

from __future__ import annotations
import logging
import os
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from typing import Dict, List

import ollama
from openai import OpenAI

import config
from errors import ModelUnavailable

logger = logging.getLogger(__name__)


class LLMResponse:
    """Unified response object for LLM responses."""

    def __init__(self, content: str):
        self.message = MessageContent(content)


class MessageContent:
    """Message content wrapper."""

    def __init__(self, content: str):
        self.content = content


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(
        self,
        model: str,
        messages: List[Dict[str, str]],
        *,
        json_mode: bool = False,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """Send a chat request to the LLM provider."""
        pass


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str | None = None, timeout: float | None = None):
        self.client = ollama.Client(host=host or config.OLLAMA_BASE_URL, timeout=timeout)

    def chat(self, model, messages, *, json_mode=False, temperature=0.7):
        """Send a chat request to Ollama."""
        response = self.client.chat(
            model=model,
            messages=messages,
            format="json" if json_mode else "",
            options={"temperature": temperature},
        )
        return LLMResponse(response.message.content)


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        api_key = api_key or os.getenv("OPENAI_API_KEY", config.OPENAI_API_KEY)
        if not api_key:
            raise ValueError("OpenAI API key is required. Set OPENAI_API_KEY environment variable or pass api_key parameter.")

        self.client = OpenAI(
            api_key=api_key,
            base_url=config.OPENAI_BASE_URL,
            timeout=timeout or config.get_timeout(),
        )

    def chat(self, model, messages, *, json_mode=False, temperature=0.7):
        """Send a chat request to OpenAI."""
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=config.OPENAI_MODEL_PARAMS.get("max_tokens", 4096),
            **kwargs,
        )

        content = response.choices[0].message.content if response.choices else ""
        return LLMResponse(content or "")


def get_llm_client() -> LLMClient | None:
    """Factory function to get the configured LLM client, or None when disabled."""
    if not config.llm_enabled():
        logger.info("llm_disabled provider=%s", config.get_provider())
        return None

    provider = config.get_provider()
    if provider == "openai":
        return OpenAIClient(timeout=config.get_timeout())
    elif provider == "ollama":
        return OllamaClient(timeout=config.get_timeout())
    else:
        raise ValueError(f"Unsupported LLM provider: {provider}")


def complete(
    client: LLMClient,
    prompt: str,
    *,
    json_mode: bool = False,
    temperature: float = 0.7,
    timeout: float | None = None,
    model: str | None = None,
) -> str:
    """
    Send a single user prompt and return the raw text of the reply.

    Every failure mode (client exception, timeout, empty reply) is raised as
    ModelUnavailable. A call that outlives `timeout` is abandoned on its
    worker thread; the caller moves on to the rule-based path.
    """
    model = model or config.get_model_for_provider()
    messages = [{"role": "user", "content": prompt}]

    executor = ThreadPoolExecutor(max_workers=1)
    future = executor.submit(
        client.chat, model, messages, json_mode=json_mode, temperature=temperature
    )
    try:
        rsp = future.result(timeout=timeout)
    except FutureTimeout as exc:
        future.cancel()
        raise ModelUnavailable(f"Model call exceeded {timeout}s.") from exc
    except Exception as exc:  # noqa: BLE001
        raise ModelUnavailable(f"Model call failed: {exc}") from exc
    finally:
        executor.shutdown(wait=False)

    content = (rsp.message.content or "") if rsp is not None else ""
    if not content.strip():
        raise ModelUnavailable("Model returned an empty response.")
    return content
