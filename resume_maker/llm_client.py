"""
LLM client abstraction layer to support multiple providers.

This module provides a unified interface for different LLM providers,
so the content generator only ever talks to an ``LLMClient`` and never to
a vendor SDK directly. Tests pass their own ``LLMClient`` subclass.
"""

from __future__ import annotations
import os
from typing import List, Dict
from abc import ABC, abstractmethod

from openai import OpenAI

from resume_maker import config

try:
    import ollama
except ImportError:
    ollama = None


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
    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to the LLM provider."""
        pass


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None):
        # Use provided API key or get from environment
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError(
                "OpenAI API key is required. Set OPENAI_API_KEY in the environment or your .env file."
            )

        self.params = config.get_openai_params()
        self.client = OpenAI(api_key=api_key)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to OpenAI."""
        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=self.params["temperature"],
            max_tokens=self.params["max_tokens"],
        )

        return LLMResponse(response.choices[0].message.content or "")


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str | None = None):
        if ollama is None:
            raise ImportError("ollama package is required for OllamaClient (pip install 'resume-maker[ollama]')")
        self.client = ollama.Client(host=host or config.OLLAMA_BASE_URL)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to Ollama."""
        response = self.client.chat(model=model, messages=messages)
        return LLMResponse(response.message.content or "")


def get_llm_client(provider: str | None = None) -> LLMClient:
    """Factory function to get the appropriate LLM client based on configuration."""
    provider = (provider or config.LLM_PROVIDER).lower()

    if provider == "openai":
        return OpenAIClient()
    elif provider == "ollama":
        return OllamaClient()
    else:
        raise ValueError(f"Unsupported LLM provider: {provider}")
