"""ExampleLoader Protocol — structural interface for reading example definitions."""

from pathlib import Path
from typing import Protocol

from agent_eval.example.domain.example import ExampleDefinition


class ExampleLoader(Protocol):
    """Discovers example directories under a root and loads them one at a time."""

    def discover(self, root: Path) -> list[Path]: ...

    def load(self, path: Path) -> ExampleDefinition: ...
