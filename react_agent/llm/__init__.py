from react_agent.llm.base_llm import BaseLLM, extract_token_usage
from react_agent.llm.litellm import LiteLLM

__all__ = ["BaseLLM", "LiteLLM", "extract_token_usage"]
