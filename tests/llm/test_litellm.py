# test_litellm.py

import pytest
from unittest.mock import patch, MagicMock

from react_agent.llm.base_llm import BaseLLM, extract_token_usage
from react_agent.llm.litellm import LiteLLM


def _mock_response(content="  Mocked response content  ", usage=None):
    mock_response = MagicMock()
    mock_response.choices[0].message.content = content
    mock_response.usage = usage
    return mock_response


class TestLiteLLM:
    # Tests that a model name is mandatory
    def test_model_required(self):
        with pytest.raises(ValueError):
            LiteLLM("")

    # Tests initialisation with endpoint and key overrides
    def test_init_parameters_stored(self):
        svc = LiteLLM("gpt-4o", api_base="http://localhost:8000/v1", api_key="sk-test", temperature=0.7, max_tokens=100)
        assert svc.model == "gpt-4o"
        assert svc.api_base == "http://localhost:8000/v1"
        assert svc.api_key == "sk-test"
        assert svc.temperature == pytest.approx(0.7)
        assert svc.max_tokens == 100

    @patch('react_agent.llm.litellm.litellm.completion')
    # Tests completion method with only the model configured
    def test_completion(self, mock_litellm_completion):
        mock_litellm_completion.return_value = _mock_response()

        svc = LiteLLM("gemini/gemini-2.0-flash", temperature=0.7)
        messages = [{"role": "user", "content": "Hello"}]
        result = svc.completion(messages)

        assert result.text == "Mocked response content"
        assert result.cost == 0
        mock_litellm_completion.assert_called_once_with(
            model="gemini/gemini-2.0-flash",
            messages=messages,
            temperature=0.7,
        )

    @patch('react_agent.llm.litellm.litellm.completion')
    # Tests that endpoint, key, limits and timeout are forwarded
    def test_completion_forwards_endpoint_settings(self, mock_litellm_completion):
        mock_litellm_completion.return_value = _mock_response(usage={"prompt_tokens": 10, "completion_tokens": 5})

        svc = LiteLLM("openai/local", api_base="http://localhost:8000/v1", api_key="sk", max_tokens=256, timeout=30)
        messages = [{"role": "user", "content": "Hello"}]
        result = svc.completion(messages)

        assert result.total_tokens == 15
        assert result.cost == 15
        mock_litellm_completion.assert_called_once_with(
            model="openai/local",
            messages=messages,
            max_tokens=256,
            api_base="http://localhost:8000/v1",
            api_key="sk",
            timeout=30,
        )

    @patch('react_agent.llm.litellm.litellm.completion')
    # Tests that per-call kwargs override defaults
    def test_completion_kwargs_parameters_used(self, mock_litellm_completion):
        mock_litellm_completion.return_value = _mock_response()

        svc = LiteLLM("claude-sonnet-4", temperature=0.2)
        messages = [{"role": "user", "content": "Hello"}]
        svc.completion(messages, temperature=0.9, stop=["Observation:"])

        mock_litellm_completion.assert_called_once_with(
            model="claude-sonnet-4",
            messages=messages,
            temperature=0.9,
            stop=["Observation:"],
        )

    @patch('react_agent.llm.litellm.litellm.completion')
    # Tests that a response without choices yields empty text
    def test_completion_empty_choices(self, mock_litellm_completion):
        resp = MagicMock()
        resp.choices = []
        resp.usage = None
        mock_litellm_completion.return_value = resp

        assert LiteLLM("gpt-4o").completion([{"role": "user", "content": "x"}]).text == ""

    @patch('react_agent.llm.litellm.litellm.completion')
    # Tests the single-prompt convenience wrapper
    def test_prompt_wraps_user_message(self, mock_litellm_completion):
        mock_litellm_completion.return_value = _mock_response("answer")

        assert LiteLLM("gpt-4o").prompt("question").text == "answer"
        assert mock_litellm_completion.call_args.kwargs["messages"] == [{"role": "user", "content": "question"}]

    @patch('react_agent.llm.litellm.litellm.completion')
    # Tests that transport errors propagate to the caller
    def test_completion_errors_propagate(self, mock_litellm_completion):
        mock_litellm_completion.side_effect = ConnectionError("unreachable")
        with pytest.raises(ConnectionError):
            LiteLLM("gpt-4o").completion([{"role": "user", "content": "x"}])


class TestTokenUsage:
    def test_openai_style_usage_object(self):
        usage = MagicMock(spec=["prompt_tokens", "completion_tokens", "total_tokens"])
        usage.prompt_tokens, usage.completion_tokens, usage.total_tokens = 3, 4, 7
        resp = MagicMock(spec=["usage"])
        resp.usage = usage
        assert extract_token_usage(resp) == (3, 4, 7)

    def test_anthropic_style_dict_computes_total(self):
        assert extract_token_usage({"usage": {"input_tokens": 8, "output_tokens": 2}}) == (8, 2, 10)

    def test_missing_usage(self):
        assert extract_token_usage({}) == (None, None, None)

    def test_response_cost_defaults_to_zero(self):
        assert BaseLLM.LLMResponse(text="x").cost == 0
        assert BaseLLM.LLMResponse(text="x", total_tokens=12).cost == 12
