import pytest

from react_agent.exceptions import ResponseParseError
from react_agent.models import RequestInput, Submit, ToolCall
from react_agent.parser import format_action, parse_action, parse_response


def test_parses_tool_call():
    thought, action = parse_response("Thought: list the files\nAction: bash ls -la")
    assert thought == "list the files"
    assert action == ToolCall("bash", "ls -la")


def test_submit_is_reserved():
    _, action = parse_response("Thought: done\nAction: submit The answer is 42")
    assert action == Submit("The answer is 42")


def test_ask_user_maps_to_request_input():
    _, action = parse_response("Thought: unsure\nAction: ask_user Which branch?")
    assert action == RequestInput("Which branch?")


def test_tool_without_args():
    _, action = parse_response("Thought: t\nAction: bash")
    assert action == ToolCall("bash", "")


def test_multiline_args_are_kept():
    text = "Thought: write it\nAction: write_file hello.py print('hi')\nprint('bye')"
    _, action = parse_response(text)
    assert action == ToolCall("write_file", "hello.py print('hi')\nprint('bye')")


def test_first_action_marker_delimits_and_later_markers_belong_to_args():
    text = "Thought: report\nAction: submit Summary\nAction: nothing else"
    _, action = parse_response(text)
    assert action == Submit("Summary\nAction: nothing else")


def test_leading_chatter_and_code_fence_are_ignored():
    text = "```\nSure!\nThought: go\nAction: read_file README.md\n```"
    thought, action = parse_response(text)
    assert thought == "go"
    assert action == ToolCall("read_file", "README.md")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Action: bash ls",
        "Thought: no action here",
        "Thought: empty action\nAction:   ",
    ],
)
def test_malformed_responses_raise(text):
    with pytest.raises(ResponseParseError):
        parse_response(text)


def test_format_action_matches_model_syntax():
    assert format_action(ToolCall("bash", "ls")) == "bash ls"
    assert format_action(ToolCall("bash", "")) == "bash"
    assert format_action(Submit("42")) == "submit 42"
    assert format_action(RequestInput("why?")) == "ask_user why?"
    assert parse_action(format_action(ToolCall("read_file", "a.txt"))) == ToolCall("read_file", "a.txt")
