"""Console-backed user oracle."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from react_agent.oracles.base import UserOracle


class ConsoleUserOracle(UserOracle):
    """Prints the prompt and reads a single line; EOF yields an empty reply."""

    def __init__(
        self,
        *,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        prefix: str = "🤖 Agent asks: ",
    ) -> None:
        self.input_stream: TextIO = input_stream or sys.stdin
        self.output_stream: TextIO = output_stream or sys.stdout
        self.prefix = prefix

    def prompt(self, text: str) -> str:
        print(f"{self.prefix}{text}", file=self.output_stream)
        print("> ", end="", file=self.output_stream, flush=True)
        line = self.input_stream.readline()
        return line.rstrip("\r\n")
