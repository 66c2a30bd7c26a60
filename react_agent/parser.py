"""Parse model output written in the two-line ``Thought:`` / ``Action:`` convention.

    Thought: I should look at the README first.
    Action: read_file README.md

The first ``Action:`` marker after ``Thought:`` ends the thought. Everything
after it (further ``Action:`` text and newlines included) belongs to the action.
"""
from __future__ import annotations

import re
from typing import Tuple

from react_agent.exceptions import ResponseParseError
from react_agent.models import Action, RequestInput, Submit, ToolCall

SUBMIT_ACTION = "submit"
ASK_USER_ACTION = "ask_user"

_THOUGHT_MARKER = "Thought:"
_ACTION_MARKER = "Action:"
_fence_pattern = re.compile(r"^```[a-zA-Z]*\s*\n?|\n?```\s*$")


def parse_response(text: str) -> Tuple[str, Action]:
    """Return ``(thought, action)`` or raise ``ResponseParseError``."""
    cleaned = _fence_pattern.sub("", (text or "").strip()).strip()

    thought_at = cleaned.find(_THOUGHT_MARKER)
    if thought_at < 0:
        raise ResponseParseError("Missing 'Thought:' line", raw=text)
    action_at = cleaned.find(_ACTION_MARKER, thought_at + len(_THOUGHT_MARKER))
    if action_at < 0:
        raise ResponseParseError("Missing 'Action:' line after 'Thought:'", raw=text)

    thought = cleaned[thought_at + len(_THOUGHT_MARKER):action_at].strip()
    action_text = cleaned[action_at + len(_ACTION_MARKER):].strip()
    return thought, parse_action(action_text)


def parse_action(action_text: str) -> Action:
    """Split ``<name> <args>`` and map reserved names onto their actions."""
    if not action_text:
        raise ResponseParseError("Empty action", raw=action_text)
    parts = action_text.split(None, 1)
    name = parts[0]
    args = parts[1].strip() if len(parts) > 1 else ""

    if name == SUBMIT_ACTION:
        return Submit(args)
    if name == ASK_USER_ACTION:
        return RequestInput(args)
    return ToolCall(name=name, args=args)


def format_action(action: Action) -> str:
    """Inverse of ``parse_action``: render an action the way the model writes it."""
    match action:
        case ToolCall(name=name, args=args):
            return f"{name} {args}".rstrip()
        case Submit(output=output):
            return f"{SUBMIT_ACTION} {output}".rstrip()
        case RequestInput(prompt=prompt):
            return f"{ASK_USER_ACTION} {prompt}".rstrip()
    raise TypeError(f"Unknown action: {action!r}")
