"""Driver loop: thread oracles through the stepper until no transition remains."""
from __future__ import annotations

from typing import Callable, Optional

from react_agent.models import Acting, AgentState, Done, NeedsInput, Submitted, Thinking
from react_agent.oracles.base import Oracles
from react_agent.stepper import advance, required_oracle, step

from utils.logger import get_logger

logger = get_logger(__name__)

TransitionCallback = Callable[[AgentState, AgentState], None]


def is_blocked(state: AgentState) -> bool:
    """True for a non-terminal state from which the stepper refuses to move."""
    if isinstance(state.phase, Done):
        return False
    return required_oracle(state) is None and advance(state) is None


def exit_code(state: AgentState) -> int:
    """0 when the agent submitted an answer, 1 for limits, errors and blocked runs."""
    if isinstance(state.phase, Done) and isinstance(state.phase.reason, Submitted):
        return 0
    return 1


def describe_outcome(state: AgentState) -> str:
    match state.phase:
        case Done(reason=reason):
            return type(reason).__name__
        case _ if is_blocked(state):
            return "Blocked"
    return type(state.phase).__name__


def run(
    oracles: Oracles,
    initial_state: AgentState,
    *,
    on_transition: Optional[TransitionCallback] = None,
) -> AgentState:
    """Step ``initial_state`` until the stepper reports no transition.

    Returns the last state produced: either ``Done(...)`` or a blocked state.
    Oracle exceptions are not caught; they end the run.
    """
    logger.info(
        "agent_run_started",
        max_steps=initial_state.config.limits.max_steps,
        max_cost=initial_state.config.limits.max_cost,
        headless=initial_state.config.headless,
    )
    state = initial_state
    transitions = 0
    while True:
        successor = step(state, oracles)
        if successor is None:
            break
        transitions += 1
        _log_transition(state, successor)
        if on_transition is not None:
            on_transition(state, successor)
        state = successor

    if is_blocked(state):
        logger.warning("agent_blocked", phase=repr(state.phase), steps=state.step_count, cost=state.cost)
    else:
        logger.info(
            "agent_run_finished",
            outcome=describe_outcome(state),
            steps=state.step_count,
            cost=state.cost,
            transitions=transitions,
        )
    return state


def _log_transition(previous: AgentState, current: AgentState) -> None:
    match current.phase:
        case Acting(thought=thought, action=action):
            preview = thought if len(thought) <= 200 else thought[:200] + "..."
            logger.debug("thought_generated", thought=preview, action=repr(action), cost=current.cost)
        case Thinking() if len(current.trace) > len(previous.trace):
            observation = current.trace[-1].observation
            preview = observation if len(observation) <= 200 else observation[:200] + "..."
            logger.debug("observation_recorded", step=current.step_count, observation_preview=preview)
        case NeedsInput(prompt=prompt):
            logger.info("input_requested", prompt=prompt)
        case Done(reason=reason):
            logger.debug("run_terminated", reason=repr(reason))
