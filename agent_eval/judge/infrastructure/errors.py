"""Error types raised by judge infrastructure."""

from agent_eval.core.errors import AgentEvalError


class JudgeInvocationError(AgentEvalError):
    """Raised when the judge cannot be invoked or returns an unparseable response."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to score run: {reason}")
