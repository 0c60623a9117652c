"""Base exception class for all agent-eval-specific errors."""


class AgentEvalError(Exception):
    """Base class for all agent-eval errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
