"""Error types raised by example infrastructure."""

from pathlib import Path

from agent_eval.core.errors import AgentEvalError


class ExampleLoadError(AgentEvalError):
    """Raised when an example directory is missing files or holds invalid metadata."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load example {path}: {reason}")


class ExamplesRootNotFoundError(AgentEvalError):
    """Raised when the examples root directory does not exist."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Failed to list examples: directory not found: {root}")
