"""Error types raised by telemetry infrastructure."""

from pathlib import Path

from agent_eval.core.errors import AgentEvalError


class TelemetryFlushError(AgentEvalError):
    """Raised when buffered telemetry events cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to flush telemetry to {path}: {reason}")
