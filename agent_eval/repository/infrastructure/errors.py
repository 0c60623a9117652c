"""Error types raised by repository infrastructure."""

from pathlib import Path

from agent_eval.core.errors import AgentEvalError


class GitCommandError(AgentEvalError):
    """Raised when a git invocation cannot start or exits non-zero."""

    def __init__(self, args: list[str], cwd: Path, reason: str) -> None:
        self.git_args = args
        self.cwd = cwd
        command = " ".join(["git", *args])
        super().__init__(f"Failed to run `{command}` in {cwd}: {reason}")


class RepositoryMismatchError(AgentEvalError):
    """Raised when a cached repository's origin is not the URL an example expects."""

    def __init__(self, path: Path, expected: str, actual: str) -> None:
        super().__init__(
            f"Failed to verify repository {path}: remote origin {actual} "
            f"does not match expected origin {expected}"
        )


class SetupError(AgentEvalError):
    """Raised when an instance's worktree or prompt cannot be prepared."""

    def __init__(self, instance_name: str, reason: str) -> None:
        self.instance_name = instance_name
        super().__init__(f"Failed to set up {instance_name}: {reason}")


class RepositoryPrepareError(AgentEvalError):
    """Raised when the cache directory for a repository cannot be created."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to prepare repository {url}: {reason}")
