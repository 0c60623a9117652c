"""Error types raised by agent infrastructure."""

from agent_eval.core.errors import AgentEvalError


class AgentInvocationError(AgentEvalError):
    """Raised when the agent cannot be invoked or returns an error response."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to invoke agent: {reason}")


class AgentTypeNotSupportedError(AgentEvalError):
    """Raised when AgentConfig.type does not name a known agent implementation."""

    def __init__(self, agent_type: str) -> None:
        self.agent_type = agent_type
        super().__init__(
            f"Failed to create agent: unsupported agent type '{agent_type}'"
        )


class DiagnosticsError(AgentEvalError):
    """Raised when the configured diagnostics command cannot be started."""

    def __init__(self, command: list[str], reason: str) -> None:
        super().__init__(
            f"Failed to collect diagnostics with `{' '.join(command)}`: {reason}"
        )
