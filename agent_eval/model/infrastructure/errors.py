"""Error types raised by model infrastructure."""

from agent_eval.core.errors import AgentEvalError


class ModelResolutionError(AgentEvalError):
    """Raised when no provider can be determined for the requested model."""

    def __init__(self, model: str, reason: str) -> None:
        self.model = model
        super().__init__(f"Failed to resolve model {model}: {reason}")


class ModelAuthenticationError(AgentEvalError):
    """Raised when the credentials the model's provider needs are not available."""

    def __init__(self, model: str, missing_keys: list[str]) -> None:
        self.model = model
        self.missing_keys = missing_keys
        keys = ", ".join(sorted(missing_keys)) or "unknown"
        super().__init__(
            f"Failed to authenticate model {model}: missing credentials: {keys}"
        )
