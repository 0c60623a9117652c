"""TelemetrySink Protocol — where judge-round telemetry events go."""

from typing import Protocol

from agent_eval.telemetry.domain.event import EvalCompletedEvent


class TelemetrySink(Protocol):
    """Accepts events during the run; ``flush`` is called once after reporting."""

    def emit(self, event: EvalCompletedEvent) -> None: ...

    def flush(self) -> None: ...
