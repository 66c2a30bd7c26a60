"""Lightweight chat-LLM interface used by the model oracle."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from utils.logger import get_logger
logger = get_logger(__name__)


class BaseLLM(ABC):
    """Minimal synchronous chat-LLM interface.

    • Accepts a list[dict] *messages* like the OpenAI Chat format.
    • Returns an ``LLMResponse`` with the assistant text and token usage.
    • Implementations SHOULD be stateless; auth + model name given at init.
    """

    @dataclass
    class LLMResponse:
        text: str
        prompt_tokens: Optional[int] = None
        completion_tokens: Optional[int] = None
        total_tokens: Optional[int] = None

        @property
        def cost(self) -> int:
            """Token cost of the call; 0 when the provider reports no usage."""
            return self.total_tokens or 0

    def __init__(self, model: str, *, temperature: float | None = None) -> None:
        if not model:
            raise ValueError("An LLM model name is required")
        self.model = model
        self.temperature = temperature

    @abstractmethod
    def completion(self, messages: List[Dict[str, str]], **kwargs) -> BaseLLM.LLMResponse: ...

    def prompt(self, content: str, **kwargs) -> BaseLLM.LLMResponse:
        """Convenience method for single user prompts."""
        return self.completion([{"role": "user", "content": content}], **kwargs)


def extract_token_usage(resp: Any) -> tuple[int | None, int | None, int | None]:
    """Extract token usage from provider response with fallbacks for different providers."""
    def _get_token(obj: Any, *keys: str) -> int | None:
        for key in keys:
            if isinstance(obj, dict):
                val = obj.get(key)
            elif hasattr(obj, key):
                val = getattr(obj, key, None)
            else:
                continue
            if isinstance(val, int) and not isinstance(val, bool):
                return val
        return None

    usage = resp.get("usage") if isinstance(resp, dict) else getattr(resp, "usage", None)
    if usage is None:
        return None, None, None

    prompt_tokens = _get_token(usage, "prompt_tokens", "input_tokens")
    completion_tokens = _get_token(usage, "completion_tokens", "output_tokens")
    total_tokens = _get_token(usage, "total_tokens")

    # Compute total if missing but components available
    if total_tokens is None and prompt_tokens is not None and completion_tokens is not None:
        total_tokens = prompt_tokens + completion_tokens

    return prompt_tokens, completion_tokens, total_tokens
