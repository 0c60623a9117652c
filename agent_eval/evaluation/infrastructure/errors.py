"""Error types raised while preparing the evaluation workspace."""

from pathlib import Path

from agent_eval.core.errors import AgentEvalError


class WorkspaceError(AgentEvalError):
    """Raised when a workspace directory or run artifact cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write workspace path {path}: {reason}")
