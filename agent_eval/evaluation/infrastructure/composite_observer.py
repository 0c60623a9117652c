"""CompositeEvaluationObserver — fans out all events to a list of observers."""

from agent_eval.evaluation.domain.observer import EvaluationObserver


class CompositeEvaluationObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[EvaluationObserver]) -> None:
        self._observers = observers

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
        for obs in self._observers:
            obs.evaluation_started(
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
        for obs in self._observers:
            obs.evaluation_completed(
                run_id=run_id,
                total_instances=total_instances,
                error_count=error_count,
                elapsed_seconds=elapsed_seconds,
            )

    def no_examples_matched(self, filters: list[str]) -> None:
        for obs in self._observers:
            obs.no_examples_matched(filters=filters)

    def instance_setup_started(self, instance: str) -> None:
        for obs in self._observers:
            obs.instance_setup_started(instance=instance)

    def instance_setup_completed(self, instance: str) -> None:
        for obs in self._observers:
            obs.instance_setup_completed(instance=instance)

    def instance_run_started(self, instance: str, example: str) -> None:
        for obs in self._observers:
            obs.instance_run_started(instance=instance, example=example)

    def instance_run_completed(self, instance: str, example: str) -> None:
        for obs in self._observers:
            obs.instance_run_completed(instance=instance, example=example)

    def instance_run_failed(self, instance: str, example: str, reason: str) -> None:
        for obs in self._observers:
            obs.instance_run_failed(instance=instance, example=example, reason=reason)

    def instance_judged(
        self, instance: str, example: str, succeeded_rounds: int, total_rounds: int
    ) -> None:
        for obs in self._observers:
            obs.instance_judged(
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
        for obs in self._observers:
            obs.judge_round_completed(
                instance=instance,
                round_index=round_index,
                diff_score=diff_score,
                thread_score=thread_score,
            )

    def judge_round_failed(self, instance: str, round_index: int, reason: str) -> None:
        for obs in self._observers:
            obs.judge_round_failed(
                instance=instance, round_index=round_index, reason=reason
            )

    def telemetry_emit_failed(self, instance: str, round_index: int, reason: str) -> None:
        for obs in self._observers:
            obs.telemetry_emit_failed(
                instance=instance, round_index=round_index, reason=reason
            )
