"""CLI utility functions for user interaction."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from react_agent.driver import describe_outcome, is_blocked
from react_agent.models import AgentState, CostLimitReached, Done, Error, StepLimitReached, Submitted
from react_agent.parser import format_action

QUIT_WORDS = {"bye", "quit", "exit", "q"}


def read_line(prompt: str = "🤖 Enter your task: ", *, input_stream: Optional[TextIO] = None) -> str:
    """Read one line from stdin; EOF or a quit word raises KeyboardInterrupt."""
    stream = input_stream or sys.stdin
    print(prompt, end="", flush=True, file=sys.stderr)
    line = stream.readline()
    if not line:  # EOF
        raise KeyboardInterrupt

    text = line.strip()
    if text.lower() in QUIT_WORDS:
        raise KeyboardInterrupt

    return text


def print_outcome(state: AgentState, *, out: Optional[TextIO] = None) -> None:
    """Print the result of a run to stdout."""
    out = out or sys.stdout
    summary = f"({state.step_count} step(s), cost {state.cost})"
    match state.phase:
        case Done(reason=Submitted(output=output)):
            print(output, file=out)
            print(f"✅ Submitted {summary}", file=sys.stderr)
        case Done(reason=StepLimitReached()):
            print(f"❌ Step limit reached {summary}", file=out)
        case Done(reason=CostLimitReached()):
            print(f"❌ Cost limit reached {summary}", file=out)
        case Done(reason=Error(message=message)):
            print(f"❌ Error: {message} {summary}", file=out)
        case _ if is_blocked(state):
            print(f"❌ Blocked: the agent requested input in headless mode {summary}", file=out)
        case _:
            print(f"❌ Stopped in phase {describe_outcome(state)} {summary}", file=out)


def print_step(previous: AgentState, current: AgentState) -> None:
    """Verbose-mode transition printer: shows each completed step on stderr."""
    if len(current.trace) > len(previous.trace):
        step = current.trace[-1]
        print(f"\n💭 Thought: {step.thought}", file=sys.stderr)
        print(f"🔧 Action: {format_action(step.action)}", file=sys.stderr)
        print(f"👀 Observation: {step.observation}", file=sys.stderr)
