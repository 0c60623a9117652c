"""JsonlTelemetrySink — buffers telemetry events and appends them to a JSONL file."""

from pathlib import Path

from agent_eval.telemetry.domain.event import EvalCompletedEvent
from agent_eval.telemetry.infrastructure.errors import TelemetryFlushError


class JsonlTelemetrySink:
    """Satisfies the TelemetrySink protocol.

    Events are held in memory until ``flush``, which appends one JSON object per
    line. Emitting never touches the filesystem, so it cannot fail a judge round.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._buffer: list[EvalCompletedEvent] = []

    @property
    def pending(self) -> list[EvalCompletedEvent]:
        return list(self._buffer)

    def emit(self, event: EvalCompletedEvent) -> None:
        self._buffer.append(event)

    def flush(self) -> None:
        """Append all buffered events to the file and clear the buffer.

        Raises:
            TelemetryFlushError: if the file cannot be written; the buffer is kept.
        """
        if not self._buffer:
            return
        lines = "".join(event.model_dump_json() + "\n" for event in self._buffer)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(lines)
        except OSError as exc:
            raise TelemetryFlushError(path=self._path, reason=str(exc)) from exc
        self._buffer.clear()
