"""FakeEvaluationObserver — records evaluation domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EvaluationStartedEvent:
    run_id: str
    run_directory: str
    model: str
    example_names: list[str]
    total_instances: int
    repetitions: int
    judge_repetitions: int
    concurrency: int


@dataclass(frozen=True)
class EvaluationCompletedEvent:
    run_id: str
    total_instances: int
    error_count: int
    elapsed_seconds: float


@dataclass(frozen=True)
class InstanceRunFailedEvent:
    instance: str
    example: str
    reason: str


@dataclass(frozen=True)
class InstanceJudgedEvent:
    instance: str
    example: str
    succeeded_rounds: int
    total_rounds: int


@dataclass(frozen=True)
class JudgeRoundCompletedEvent:
    instance: str
    round_index: int
    diff_score: int
    thread_score: int | None


@dataclass(frozen=True)
class RoundFailureEvent:
    instance: str
    round_index: int
    reason: str


class FakeEvaluationObserver:
    """Records emitted evaluation events.

    Events that carry data are kept as typed frozen dataclasses. In addition,
    ``timeline`` keeps every per-instance event as ``(event, instance)`` in
    emission order, so tests can assert phase ordering.
    """

    def __init__(self) -> None:
        self.started: list[EvaluationStartedEvent] = []
        self.completed: list[EvaluationCompletedEvent] = []
        self.no_matches: list[list[str]] = []
        self.run_failed: list[InstanceRunFailedEvent] = []
        self.judged: list[InstanceJudgedEvent] = []
        self.rounds_completed: list[JudgeRoundCompletedEvent] = []
        self.rounds_failed: list[RoundFailureEvent] = []
        self.telemetry_failures: list[RoundFailureEvent] = []
        self.timeline: list[tuple[str, str]] = []

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
        self.started.append(
            EvaluationStartedEvent(
                run_id=run_id,
                run_directory=run_directory,
                model=model,
                example_names=example_names,
                total_instances=total_instances,
                repetitions=repetitions,
                judge_repetitions=judge_repetitions,
                concurrency=concurrency,
            )
        )

    def evaluation_completed(
        self,
        run_id: str,
        total_instances: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None:
        self.completed.append(
            EvaluationCompletedEvent(
                run_id=run_id,
                total_instances=total_instances,
                error_count=error_count,
                elapsed_seconds=elapsed_seconds,
            )
        )

    def no_examples_matched(self, filters: list[str]) -> None:
        self.no_matches.append(filters)

    def instance_setup_started(self, instance: str) -> None:
        self.timeline.append(("setup_started", instance))

    def instance_setup_completed(self, instance: str) -> None:
        self.timeline.append(("setup_completed", instance))

    def instance_run_started(self, instance: str, example: str) -> None:
        self.timeline.append(("run_started", instance))

    def instance_run_completed(self, instance: str, example: str) -> None:
        self.timeline.append(("run_completed", instance))

    def instance_run_failed(self, instance: str, example: str, reason: str) -> None:
        self.timeline.append(("run_failed", instance))
        self.run_failed.append(
            InstanceRunFailedEvent(instance=instance, example=example, reason=reason)
        )

    def instance_judged(
        self, instance: str, example: str, succeeded_rounds: int, total_rounds: int
    ) -> None:
        self.timeline.append(("judged", instance))
        self.judged.append(
            InstanceJudgedEvent(
                instance=instance,
                example=example,
                succeeded_rounds=succeeded_rounds,
                total_rounds=total_rounds,
            )
        )

    def judge_round_completed(
        self,
        instance: str,
        round_index: int,
        diff_score: int,
        thread_score: int | None,
    ) -> None:
        self.rounds_completed.append(
            JudgeRoundCompletedEvent(
                instance=instance,
                round_index=round_index,
                diff_score=diff_score,
                thread_score=thread_score,
            )
        )

    def judge_round_failed(self, instance: str, round_index: int, reason: str) -> None:
        self.rounds_failed.append(
            RoundFailureEvent(instance=instance, round_index=round_index, reason=reason)
        )

    def telemetry_emit_failed(self, instance: str, round_index: int, reason: str) -> None:
        self.telemetry_failures.append(
            RoundFailureEvent(instance=instance, round_index=round_index, reason=reason)
        )
