"""Prompt templates and rendering of a trace into chat messages."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

import yaml

from react_agent.models import Trace
from react_agent.parser import format_action
from react_agent.tools.base import ToolBase


def load_prompts(profile: str, required_keys: list[str]) -> dict[str, str]:
    path = Path(__file__).parent / f"{profile}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise TypeError(f"YAML root must be a mapping: {path}")
    missing = [k for k in required_keys if k not in data or not isinstance(data[k], str) or not data[k].strip()]
    if missing:
        raise KeyError(f"Missing/empty prompt keys in {path}: {missing}")
    return data


def build_system_prompt(task: str, tools: Iterable[ToolBase], *, interactive: bool = False) -> str:
    """Fill the ``react`` template with the task and one summary line per tool the agent may call."""
    prompts = load_prompts("agent", required_keys=["react", "ask_user"])
    summaries = [tool.get_summary() for tool in sorted(tools, key=lambda t: t.id)]
    tool_lines = "\n".join(f"- {summary}" for summary in summaries) or "- (no tools available)"
    ask_user = prompts["ask_user"].strip() if interactive else ""
    return prompts["react"].format(task=task, tools=tool_lines, ask_user=ask_user).strip()


def render_messages(system_prompt: str, trace: Trace) -> List[Dict[str, str]]:
    """System message, then one assistant + one user message per completed step."""
    messages: List[Dict[str, str]] = [{"role": "system", "content": system_prompt}]
    for s in trace:
        messages.append({"role": "assistant", "content": f"Thought: {s.thought}\nAction: {format_action(s.action)}"})
        messages.append({"role": "user", "content": f"Observation: {s.observation}"})
    return messages
