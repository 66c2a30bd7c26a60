from __future__ import annotations
import dataclasses
from typing import Dict, Optional

DEFAULT_MODEL = "gpt-4o-mini"


@dataclasses.dataclass
class LLM:
    model: str = DEFAULT_MODEL
    endpoint: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    timeout: Optional[float] = 120.0


@dataclasses.dataclass
class Agent:
    max_steps: int = 20
    max_cost: int = 100_000
    headless: bool = True
    workdir: str = "."
    max_parse_retries: int = 2
    max_observation_chars: int = 20_000
    bash_timeout: float = 60.0


@dataclasses.dataclass
class LoggingFile:
    enabled: bool = False
    level: str = "DEBUG"
    path: str = "logs/react-agent.log"
    rotation: bool = True
    max_bytes: int = 10_000_000
    backup_count: int = 5


@dataclasses.dataclass
class Logging:
    level: str = "WARNING"
    file: LoggingFile = dataclasses.field(default_factory=LoggingFile)
    libraries: Dict[str, str] = dataclasses.field(
        default_factory=lambda: {"LiteLLM": "WARNING", "httpx": "WARNING", "httpcore": "WARNING"}
    )


@dataclasses.dataclass
class Config:
    llm: LLM = dataclasses.field(default_factory=LLM)
    agent: Agent = dataclasses.field(default_factory=Agent)
    logging: Logging = dataclasses.field(default_factory=Logging)
