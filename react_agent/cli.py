"""Command-line entry point: ``react-agent [--mode prompt|chat|react] TASK``."""
from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from react_agent.agent import ChatSession, ReactAgent, prompt_once
from react_agent.driver import exit_code
from react_agent.exceptions import ConfigError
from react_agent.llm.litellm import LiteLLM
from react_agent.models import Limits
from react_agent.oracles.user import ConsoleUserOracle
from react_agent.tools.local import default_registry
from utils.cli import print_outcome, print_step, read_line
from utils.config import Config
from utils.load_config import load_config
from utils.logger import get_logger, init_logger

logger = get_logger(__name__)

ENV_PREFIX = "REACT_AGENT_"
MODES = ("prompt", "chat", "react")


@dataclass
class Settings:
    """Fully resolved run settings (flags > environment > env-file > config.toml)."""

    mode: str
    task: Optional[str]
    model: str
    endpoint: Optional[str]
    api_key: Optional[str]
    max_steps: int
    max_cost: int
    interactive: bool
    workdir: Path
    verbose: bool


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {parsed}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="react-agent",
        description="Drive an LLM through a think → act → observe loop with local tools.",
    )
    parser.add_argument("task", nargs="?", help="Task for the agent (read from stdin when omitted)")
    parser.add_argument("--mode", choices=MODES, default="react", help="prompt: one completion; chat: interactive chat; react: agent loop (default)")
    parser.add_argument("-e", "--endpoint", help="Model endpoint / API base URL")
    parser.add_argument("-m", "--model", help="Model name")
    parser.add_argument("-k", "--api-key", dest="api_key", help="API key for the model endpoint")
    parser.add_argument("--max-steps", dest="max_steps", type=_non_negative_int, help="Maximum number of tool steps")
    parser.add_argument("--max-cost", dest="max_cost", type=_non_negative_int, help="Maximum total token cost")
    parser.add_argument("-i", "--interactive", action="store_true", help="Allow the agent to ask the user for input")
    parser.add_argument("-w", "--workdir", help="Working directory for tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print each step and debug logs")
    parser.add_argument("--env-file", dest="env_file", default=".env", help="Env file to load (default: .env)")
    parser.add_argument("--config", dest="config", help="Path to a config.toml")
    return parser


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{ENV_PREFIX}{name} must be >= 0, got {value}")
    return value


def _first(*values):
    return next((v for v in values if v is not None), None)


def resolve_settings(args: argparse.Namespace, config: Config) -> Settings:
    """Merge flags, environment variables and file configuration."""
    return Settings(
        mode=args.mode,
        task=args.task,
        model=_first(args.model, os.getenv(ENV_PREFIX + "MODEL"), config.llm.model),
        endpoint=_first(args.endpoint, os.getenv(ENV_PREFIX + "ENDPOINT"), config.llm.endpoint),
        api_key=_first(args.api_key, os.getenv(ENV_PREFIX + "API_KEY")),
        max_steps=_first(args.max_steps, _env_int("MAX_STEPS"), config.agent.max_steps),
        max_cost=_first(args.max_cost, _env_int("MAX_COST"), config.agent.max_cost),
        interactive=args.interactive or not config.agent.headless,
        workdir=Path(_first(args.workdir, os.getenv(ENV_PREFIX + "WORKDIR"), config.agent.workdir)),
        verbose=args.verbose,
    )


def build_llm(settings: Settings, config: Config) -> LiteLLM:
    return LiteLLM(
        settings.model,
        api_base=settings.endpoint,
        api_key=settings.api_key,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
        timeout=config.llm.timeout,
    )


def _read_task(settings: Settings) -> str:
    if settings.task:
        return settings.task
    if sys.stdin.isatty():
        return read_line()
    return sys.stdin.read().strip()


def run_prompt(settings: Settings, config: Config) -> int:
    reply = prompt_once(build_llm(settings, config), _read_task(settings))
    print(reply.text)
    return 0


def run_chat(settings: Settings, config: Config) -> int:
    session = ChatSession(build_llm(settings, config))
    text = settings.task
    while True:
        try:
            if not text:
                text = read_line("🧑 You: ")
                if not text:
                    continue
            print(f"🤖 {session.send(text)}")
            text = None
        except KeyboardInterrupt:
            logger.info("chat_finished", total_tokens=session.total_tokens)
            return 0


def run_react(settings: Settings, config: Config) -> int:
    task = _read_task(settings)
    if not task:
        raise ConfigError("No task given")
    if not settings.workdir.is_dir():
        raise ConfigError(f"Working directory does not exist: {settings.workdir}")

    agent = ReactAgent(
        llm=build_llm(settings, config),
        limits=Limits(max_steps=settings.max_steps, max_cost=settings.max_cost),
        tools=default_registry(bash_timeout=config.agent.bash_timeout),
        workdir=settings.workdir,
        user=ConsoleUserOracle(output_stream=sys.stderr) if settings.interactive else None,
        headless=not settings.interactive,
        max_parse_retries=config.agent.max_parse_retries,
        max_observation_chars=config.agent.max_observation_chars,
    )
    final_state = agent.solve(task, on_transition=print_step if settings.verbose else None)
    print_outcome(final_state)
    return exit_code(final_state)


_RUNNERS = {"prompt": run_prompt, "chat": run_chat, "react": run_react}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.env_file and Path(args.env_file).is_file():
        load_dotenv(args.env_file, override=False)

    try:
        config = load_config(args.config)
        init_logger(config.logging, verbose=args.verbose)
        settings = resolve_settings(args, config)
    except ConfigError as exc:
        parser.error(str(exc))

    logger.debug("settings_resolved", mode=settings.mode, model=settings.model, endpoint=settings.endpoint,
                 max_steps=settings.max_steps, max_cost=settings.max_cost, interactive=settings.interactive)
    try:
        return _RUNNERS[settings.mode](settings, config)
    except ConfigError as exc:
        parser.error(str(exc))
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 1
    except Exception as exc:
        logger.exception("run_failed", mode=settings.mode, error=str(exc))
        print(f"❌ Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
