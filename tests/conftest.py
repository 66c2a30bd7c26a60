import pytest
from typing import Dict, List

from react_agent.llm.base_llm import BaseLLM
from react_agent.models import AgentConfig, AgentState, Limits


class DummyLLM(BaseLLM):
    """Replays queued reply texts; records the message lists it received."""

    def __init__(self, *, text_queue: List[str] | None = None, tokens_per_call: int | None = None):
        super().__init__("dummy-model")
        self.text_queue = list(text_queue or [])
        self.tokens_per_call = tokens_per_call
        self.calls: List[List[Dict[str, str]]] = []

    def completion(self, messages: List[Dict[str, str]], **kwargs) -> BaseLLM.LLMResponse:
        self.calls.append(list(messages))
        text = self.text_queue.pop(0) if self.text_queue else ""
        return BaseLLM.LLMResponse(text=text, total_tokens=self.tokens_per_call)


class ExplodingLLM(BaseLLM):
    def __init__(self, exc: Exception):
        super().__init__("exploding-model")
        self.exc = exc

    def completion(self, messages, **kwargs):  # type: ignore[override]
        raise self.exc


def make_config(max_steps: int = 10, max_cost: int = 100, *, headless: bool = True, tools=("bash",)) -> AgentConfig:
    return AgentConfig(limits=Limits(max_steps=max_steps, max_cost=max_cost), tool_names=frozenset(tools), headless=headless)


@pytest.fixture
def dummy_llm() -> DummyLLM:
    return DummyLLM()


@pytest.fixture
def headless_state() -> AgentState:
    return AgentState.initial(make_config())


@pytest.fixture
def interactive_state() -> AgentState:
    return AgentState.initial(make_config(headless=False))
