"""Model oracle: render the trace, ask the LLM, parse ``Thought:``/``Action:``."""
from __future__ import annotations

from typing import Dict, List

from react_agent.exceptions import ResponseParseError
from react_agent.llm.base_llm import BaseLLM
from react_agent.models import Trace
from react_agent.oracles.base import LlmFailure, LlmOracle, LlmOutcome, LlmResponse
from react_agent.parser import parse_response
from react_agent.prompts import load_prompts, render_messages

from utils.logger import get_logger
logger = get_logger(__name__)

DEFAULT_MAX_PARSE_RETRIES = 2


class ModelOracle(LlmOracle):
    """Turns an LLM chat client into an ``LlmOracle``.

    Replies that do not follow the format are retried up to
    ``max_parse_retries`` times with a correction message; the tokens of
    every attempt count towards the returned cost. When retries run out the
    oracle returns an ``LlmFailure``. Client exceptions are not caught.
    """

    def __init__(self, llm: BaseLLM, system_prompt: str, *, max_parse_retries: int = DEFAULT_MAX_PARSE_RETRIES) -> None:
        self.llm = llm
        self.system_prompt = system_prompt
        self.max_parse_retries = max(0, max_parse_retries)
        self._correction_template = load_prompts("agent", required_keys=["correction"])["correction"]

    def respond(self, trace: Trace) -> LlmOutcome:
        messages: List[Dict[str, str]] = render_messages(self.system_prompt, trace)
        cost = 0
        error: ResponseParseError | None = None

        for attempt in range(self.max_parse_retries + 1):
            reply = self.llm.completion(messages)
            cost += reply.cost
            try:
                thought, action = parse_response(reply.text)
            except ResponseParseError as exc:
                error = exc
                logger.warning("response_parse_failed", attempt=attempt, error=str(exc))
                messages = messages + [
                    {"role": "assistant", "content": reply.text},
                    {"role": "user", "content": self._correction_template.format(error=exc).strip()},
                ]
                continue
            return LlmResponse(thought=thought, action=action, cost=cost)

        return LlmFailure(f"Unparseable model output: {error}", cost=cost)
