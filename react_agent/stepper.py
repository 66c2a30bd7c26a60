"""
Deterministic transition function for the agent state machine.

``advance`` is pure: given a state and the output of the oracle that state
asked for, it returns the successor state, or ``None`` when no transition
exists (the run is finished, or a headless agent tried to ask for input).
``step`` wraps it with exactly one oracle call.

| phase                    | oracle | next phase            | trace  | counters          |
|--------------------------|--------|-----------------------|--------|-------------------|
| Thinking (within limits) | llm    | Acting(thought, act)  | same   | cost += r.cost    |
| Thinking (steps used up) | -      | Done(StepLimitReached)| same   | same              |
| Thinking (cost used up)  | -      | Done(CostLimitReached)| same   | same              |
| Acting(t, ToolCall)      | env    | Thinking              | +step  | step_count += 1   |
| Acting(t, Submit)        | -      | Done(Submitted)       | same   | same              |
| Acting(t, RequestInput)  | -      | NeedsInput / blocked  | same   | same              |
| NeedsInput(p)            | user   | Thinking              | +step  | same              |
| Done                     | -      | no transition         |        |                   |
"""
from __future__ import annotations

from typing import Literal, Optional, Union

from react_agent.exceptions import MissingOracleError
from react_agent.models import (
    Acting,
    AgentState,
    CostLimitReached,
    Done,
    Error,
    NeedsInput,
    RequestInput,
    Step,
    StepLimitReached,
    Submit,
    Submitted,
    Thinking,
    ToolCall,
)
from react_agent.oracles.base import LlmFailure, LlmResponse, Oracles

# Thought recorded for steps produced by a human reply rather than the model.
INPUT_PLACEHOLDER_THOUGHT = "(awaiting user input)"

OracleKind = Literal["llm", "env", "user"]
OracleOutput = Union[LlmResponse, LlmFailure, str, None]


def limit_reason(state: AgentState) -> Optional[Union[StepLimitReached, CostLimitReached]]:
    """Return why a ``Thinking`` state may not consult the model, if it may not."""
    limits = state.config.limits
    if state.step_count >= limits.max_steps:
        return StepLimitReached()
    if state.cost >= limits.max_cost:
        return CostLimitReached()
    return None


def required_oracle(state: AgentState) -> Optional[OracleKind]:
    """Which oracle the next transition needs, or ``None`` if it needs none."""
    match state.phase:
        case Thinking():
            return None if limit_reason(state) else "llm"
        case Acting(action=ToolCall()):
            return "env"
        case Acting():
            return None
        case NeedsInput():
            return None if state.config.headless else "user"
        case Done():
            return None
    raise TypeError(f"Unknown phase: {state.phase!r}")


def advance(state: AgentState, output: OracleOutput = None) -> Optional[AgentState]:
    """Advance ``state`` by one transition using ``output`` from the required oracle.

    Returns ``None`` if no transition exists. Raises ``TypeError`` if ``output``
    is not what the current phase asked for.
    """
    phase = state.phase
    match phase:
        case Done():
            return None

        case Thinking():
            reason = limit_reason(state)
            if reason is not None:
                return state.evolve(phase=Done(reason))
            if isinstance(output, LlmResponse):
                return state.evolve(
                    phase=Acting(thought=output.thought, action=output.action),
                    cost=state.cost + output.cost,
                )
            if isinstance(output, LlmFailure):
                return state.evolve(phase=Done(Error(output.message)), cost=state.cost + output.cost)
            raise TypeError(f"Thinking expects an LlmResponse or LlmFailure, got {type(output).__name__}")

        case Acting(thought=thought, action=ToolCall() as call):
            if not isinstance(output, str):
                raise TypeError(f"Tool call expects an observation string, got {type(output).__name__}")
            return state.evolve(
                phase=Thinking(),
                trace=state.trace + (Step(thought=thought, action=call, observation=output),),
                step_count=state.step_count + 1,
            )

        case Acting(action=Submit(output=answer)):
            return state.evolve(phase=Done(Submitted(answer)))

        case Acting(action=RequestInput(prompt=prompt)):
            if state.config.headless:
                return None
            return state.evolve(phase=NeedsInput(prompt))

        case NeedsInput(prompt=prompt):
            if state.config.headless:
                return None
            if not isinstance(output, str):
                raise TypeError(f"NeedsInput expects a reply string, got {type(output).__name__}")
            return state.evolve(
                phase=Thinking(),
                trace=state.trace + (Step(INPUT_PLACEHOLDER_THOUGHT, RequestInput(prompt), output),),
            )

    raise TypeError(f"Unknown phase: {phase!r}")


def step(state: AgentState, oracles: Oracles) -> Optional[AgentState]:
    """Query the single oracle the current phase needs, then ``advance``."""
    output: OracleOutput = None
    match required_oracle(state):
        case "llm":
            output = oracles.llm.respond(state.trace)
        case "env":
            match state.phase:
                case Acting(action=ToolCall(name=name, args=args)):
                    output = oracles.env.execute(name, args)
        case "user":
            match state.phase:
                case NeedsInput(prompt=prompt):
                    if oracles.user is None:
                        raise MissingOracleError("user", state.phase)
                    output = oracles.user.prompt(prompt)
    return advance(state, output)
