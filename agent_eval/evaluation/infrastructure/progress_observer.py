"""ProgressEvaluationObserver — renders per-example Rich progress bars to stderr."""

from __future__ import annotations

from rich.console import Console, Group
from rich.live import Live
from rich.progress import (
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

_OVERALL = "Overall"
_BAR_CELLS = 30

# (glyph, style, legend label) for the finished, running and waiting segments.
_SEGMENTS: tuple[tuple[str, str, str], ...] = (
    ("█", "bright_green", "done"),
    ("▒", "grey50", "running"),
    ("░", "dim white", "waiting"),
)

_EXAMPLE_COLORS: list[str] = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def _field(task: Task, name: str) -> int:
    return int(task.fields.get(name, 0))


class _CountsColumn(ProgressColumn):
    """done+running/total, followed by the failure count when there is one."""

    def render(self, task: Task) -> Text:
        (_, done_style, _), (_, running_style, _), _ = _SEGMENTS
        text = Text()
        text.append(str(_field(task, "done")), style=done_style)
        text.append("+", style="dim white")
        text.append(str(_field(task, "running")), style=running_style)
        text.append(f"/{int(task.total or 0)}")
        failed = _field(task, "failed")
        if failed:
            text.append(f"  {failed} failed", style="red")
        return text


class _SegmentedBarColumn(ProgressColumn):
    def render(self, task: Task) -> Text:
        total = task.total or 0
        done_cells = running_cells = 0
        if total:
            done_cells = int(task.completed * _BAR_CELLS / total)
            running_cells = int(_field(task, "running") * _BAR_CELLS / total)
            running_cells = min(running_cells, _BAR_CELLS - done_cells)
        widths = (done_cells, running_cells, _BAR_CELLS - done_cells - running_cells)

        bar = Text()
        for (glyph, style, _), width in zip(_SEGMENTS, widths):
            bar.append(glyph * width, style=style)
        return bar


def _legend() -> Text:
    legend = Text("  Legend:")
    for glyph, style, label in _SEGMENTS:
        legend.append("  ")
        legend.append(glyph, style=style)
        legend.append(f" {label}")
    return legend


class ProgressEvaluationObserver:
    """One Rich progress row per example, plus an Overall row, on stderr.

    An instance is running from instance_run_started until it is judged or its
    run fails; either way it then counts as done. Other events are ignored.

    ``disabled=True`` keeps the counters but renders nothing.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False, console: Console | None = None) -> None:
        self._disabled = disabled
        self._console = console
        self._rows: dict[str, dict[str, int]] = {}
        self._task_ids: dict[str, TaskID] = {}
        self._progress: Progress | None = None
        self._live: Live | None = None

    def counts(self, key: str) -> tuple[int, int, int]:
        """(done, running, failed) for an example name or ``"Overall"``."""
        row = self._rows.get(key, {})
        return row.get("done", 0), row.get("running", 0), row.get("failed", 0)

    def _bump(self, example: str, **deltas: int) -> None:
        for key in (example, _OVERALL):
            row = self._rows.get(key)
            if row is None:
                continue
            for field, delta in deltas.items():
                row[field] = max(0, row[field] + delta)
            if self._progress is not None and key in self._task_ids:
                self._progress.update(self._task_ids[key], completed=row["done"], **row)

    def _add_row(
        self, progress: Progress, key: str, label: str, total: int
    ) -> None:
        self._task_ids[key] = progress.add_task(
            description=label, total=float(total), **self._rows[key]
        )

    def evaluation_started(
        self,
        run_id: str,
        run_directory: str,
        model: str,
        example_names: list[str],
        total_instances: int,
        repetitions: int,
        judge_repetitions: int,
        concurrency: int,
    ) -> None:
        self._rows = {
            key: {"done": 0, "running": 0, "failed": 0}
            for key in [*example_names, _OVERALL]
        }
        self._task_ids = {}
        self._progress = None
        self._live = None
        if self._disabled:
            return

        console = self._console or Console(stderr=True)
        width = max(len(key) for key in self._rows)
        progress = Progress(
            TextColumn("{task.description}"),
            _SegmentedBarColumn(),
            _CountsColumn(),
            TimeElapsedColumn(),
            console=console,
        )
        overall_label = f"[bold]{_OVERALL:<{width}}[/bold]"
        self._add_row(progress, _OVERALL, overall_label, total_instances)
        for index, name in enumerate(example_names):
            color = _EXAMPLE_COLORS[index % len(_EXAMPLE_COLORS)]
            label = f"[{color}]{name:<{width}}[/{color}]"
            self._add_row(progress, name, label, repetitions)

        self._progress = progress
        self._live = Live(
            Group(progress, Text(""), _legend()),
            console=console,
            refresh_per_second=10,
        )
        self._live.start()

    def evaluation_completed(
        self,
        run_id: str,
        total_instances: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None:
        if self._live is not None:
            self._live.stop()
        self._live = None
        self._progress = None

    def no_examples_matched(self, filters: list[str]) -> None:
        pass

    def instance_setup_started(self, instance: str) -> None:
        pass

    def instance_setup_completed(self, instance: str) -> None:
        pass

    def instance_run_started(self, instance: str, example: str) -> None:
        self._bump(example, running=1)

    def instance_run_completed(self, instance: str, example: str) -> None:
        pass

    def instance_run_failed(self, instance: str, example: str, reason: str) -> None:
        self._bump(example, running=-1, done=1, failed=1)

    def instance_judged(
        self, instance: str, example: str, succeeded_rounds: int, total_rounds: int
    ) -> None:
        self._bump(example, running=-1, done=1)

    def judge_round_completed(
        self,
        instance: str,
        round_index: int,
        diff_score: int,
        thread_score: int | None,
    ) -> None:
        pass

    def judge_round_failed(self, instance: str, round_index: int, reason: str) -> None:
        pass

    def telemetry_emit_failed(self, instance: str, round_index: int, reason: str) -> None:
        pass
