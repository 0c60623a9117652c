"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

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
        self._log.info(
            "evaluation.started",
            run_id=run_id,
            run_directory=run_directory,
            model=model,
            example_names=example_names,
            total_instances=total_instances,
            repetitions=repetitions,
            judge_repetitions=judge_repetitions,
            concurrency=concurrency,
        )

    def evaluation_completed(
        self,
        run_id: str,
        total_instances: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "evaluation.completed",
            run_id=run_id,
            total_instances=total_instances,
            error_count=error_count,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def no_examples_matched(self, filters: list[str]) -> None:
        self._log.warning("evaluation.no_examples_matched", filters=filters)

    def instance_setup_started(self, instance: str) -> None:
        self._log.info("evaluation.instance.setup_started", instance=instance)

    def instance_setup_completed(self, instance: str) -> None:
        self._log.info("evaluation.instance.setup_completed", instance=instance)

    def instance_run_started(self, instance: str, example: str) -> None:
        self._log.info("evaluation.instance.started", instance=instance, example=example)

    def instance_run_completed(self, instance: str, example: str) -> None:
        self._log.info(
            "evaluation.instance.completed", instance=instance, example=example
        )

    def instance_run_failed(self, instance: str, example: str, reason: str) -> None:
        self._log.error(
            "evaluation.instance.failed",
            instance=instance,
            example=example,
            reason=reason,
        )

    def instance_judged(
        self, instance: str, example: str, succeeded_rounds: int, total_rounds: int
    ) -> None:
        self._log.info(
            "evaluation.instance.judged",
            instance=instance,
            example=example,
            succeeded_rounds=succeeded_rounds,
            total_rounds=total_rounds,
        )

    def judge_round_completed(
        self,
        instance: str,
        round_index: int,
        diff_score: int,
        thread_score: int | None,
    ) -> None:
        self._log.info(
            "evaluation.judge_round.completed",
            instance=instance,
            round_index=round_index,
            diff_score=diff_score,
            thread_score=thread_score,
        )

    def judge_round_failed(self, instance: str, round_index: int, reason: str) -> None:
        self._log.error(
            "evaluation.judge_round.failed",
            instance=instance,
            round_index=round_index,
            reason=reason,
        )

    def telemetry_emit_failed(self, instance: str, round_index: int, reason: str) -> None:
        self._log.warning(
            "evaluation.telemetry.emit_failed",
            instance=instance,
            round_index=round_index,
            reason=reason,
        )
