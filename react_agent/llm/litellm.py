from typing import Any, Dict, List

import litellm

from react_agent.llm.base_llm import BaseLLM, extract_token_usage

from utils.logger import get_logger
logger = get_logger(__name__)


class LiteLLM(BaseLLM):
    """Wrapper around litellm.completion.

    ``api_base`` points litellm at a custom (e.g. OpenAI-compatible or local)
    endpoint; ``api_key`` overrides the provider key from the environment.
    """

    def __init__(
        self,
        model: str,
        *,
        api_base: str | None = None,
        api_key: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(model, temperature=temperature)
        self.api_base = api_base
        self.api_key = api_key
        self.max_tokens = max_tokens
        self.timeout = timeout

    def completion(self, messages: List[Dict[str, str]], **kwargs) -> BaseLLM.LLMResponse:
        # Merge default parameters with provided kwargs
        effective_temperature = kwargs.get("temperature", self.temperature)
        effective_max_tokens = kwargs.get("max_tokens", self.max_tokens)

        completion_kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
        }
        if effective_temperature is not None:
            completion_kwargs["temperature"] = effective_temperature
        if effective_max_tokens is not None:
            completion_kwargs["max_tokens"] = effective_max_tokens
        if self.api_base:
            completion_kwargs["api_base"] = self.api_base
        if self.api_key:
            completion_kwargs["api_key"] = self.api_key
        if self.timeout is not None:
            completion_kwargs["timeout"] = self.timeout

        # Add any additional kwargs (like stop sequences)
        for key, value in kwargs.items():
            if key not in ["temperature", "max_tokens"]:
                completion_kwargs[key] = value

        logger.debug("llm_request", model=self.model, message_count=len(messages))
        resp = litellm.completion(**completion_kwargs)

        text = ""
        try:
            text = (resp.choices[0].message.content or "").strip()
        except (IndexError, AttributeError):
            logger.warning("llm_empty_response", model=self.model)

        prompt_tokens, completion_tokens, total_tokens = extract_token_usage(resp)
        logger.debug("llm_response", model=self.model, total_tokens=total_tokens)

        return BaseLLM.LLMResponse(
            text=text,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=total_tokens,
        )
