"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events during an evaluation run.

    Implementations may log to structlog, render progress, or record for tests.
    """

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
    ) -> None: ...

    def evaluation_completed(
        self,
        run_id: str,
        total_instances: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None: ...

    def no_examples_matched(self, filters: list[str]) -> None: ...

    def instance_setup_started(self, instance: str) -> None: ...

    def instance_setup_completed(self, instance: str) -> None: ...

    def instance_run_started(self, instance: str, example: str) -> None: ...

    def instance_run_completed(self, instance: str, example: str) -> None: ...

    def instance_run_failed(self, instance: str, example: str, reason: str) -> None: ...

    def instance_judged(
        self, instance: str, example: str, succeeded_rounds: int, total_rounds: int
    ) -> None: ...

    def judge_round_completed(
        self,
        instance: str,
        round_index: int,
        diff_score: int,
        thread_score: int | None,
    ) -> None: ...

    def judge_round_failed(self, instance: str, round_index: int, reason: str) -> None: ...

    def telemetry_emit_failed(self, instance: str, round_index: int, reason: str) -> None: ...
