"""JudgeAggregator — runs one judge round and reports its telemetry."""

from collections.abc import Awaitable, Callable
from datetime import datetime

from agent_eval.agent.domain.result import RunOutput
from agent_eval.evaluation.domain.observer import EvaluationObserver
from agent_eval.evaluation.domain.run import RUN_DIRECTORY_FORMAT, JudgeRound
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.judge.domain.judge import Judge
from agent_eval.judge.domain.score import JudgeOutput
from agent_eval.model.domain.model import ResolvedModel
from agent_eval.telemetry.domain.event import EvalCompletedEvent
from agent_eval.telemetry.domain.sink import TelemetrySink

type CommitIdProvider = Callable[[], Awaitable[str]]


class JudgeAggregator:
    """Wraps a single judge invocation.

    A failing round becomes a JudgeRound carrying the error; it never raises,
    so sibling rounds of the same run are unaffected. Every successful round
    emits exactly one EvalCompletedEvent.
    """

    def __init__(
        self,
        judge: Judge,
        telemetry: TelemetrySink,
        commit_id: CommitIdProvider,
        session_id: str,
        installation_id: str | None,
        observer: EvaluationObserver,
    ) -> None:
        self._judge = judge
        self._telemetry = telemetry
        self._commit_id = commit_id
        self._session_id = session_id
        self._installation_id = installation_id
        self._observer = observer

    async def judge_round(
        self,
        instance: ScheduledInstance,
        run_output: RunOutput,
        round_index: int,
        model: ResolvedModel,
    ) -> JudgeRound:
        try:
            output = await self._judge.judge(
                instance=instance, run_output=run_output, round_index=round_index
            )
        except Exception as exc:  # noqa: BLE001
            self._observer.judge_round_failed(
                instance=instance.name, round_index=round_index, reason=str(exc)
            )
            return JudgeRound(round_index=round_index, error=str(exc))

        self._observer.judge_round_completed(
            instance=instance.name,
            round_index=round_index,
            diff_score=output.diff.score,
            thread_score=output.thread.score if output.thread else None,
        )
        await self._emit(
            instance=instance,
            run_output=run_output,
            output=output,
            round_index=round_index,
            model=model,
        )
        return JudgeRound(round_index=round_index, output=output)

    async def _emit(
        self,
        instance: ScheduledInstance,
        run_output: RunOutput,
        output: JudgeOutput,
        round_index: int,
        model: ResolvedModel,
    ) -> None:
        try:
            event = EvalCompletedEvent(
                cohort_id=cohort_id(instance=instance),
                session_id=self._session_id,
                installation_id=self._installation_id,
                example_name=instance.name,
                round=round_index,
                diff_score=output.diff.score,
                diff_analysis=output.diff.analysis,
                thread_score=output.thread.score if output.thread else None,
                thread_analysis=output.thread.analysis if output.thread else None,
                tool_metrics=run_output.tool_metrics,
                response_count=run_output.response_count,
                token_usage=run_output.token_usage,
                model=model.telemetry_id,
                model_provider=model.provider,
                repository_url=instance.example.base.url,
                repository_revision=instance.example.base.revision,
                diagnostics_before=run_output.diagnostics_before,
                diagnostics_after=run_output.diagnostics_after,
                commit_id=await self._commit_id(),
            )
            self._telemetry.emit(event=event)
        except Exception as exc:  # noqa: BLE001
            self._observer.telemetry_emit_failed(
                instance=instance.name, round_index=round_index, reason=str(exc)
            )


def cohort_id(instance: ScheduledInstance) -> str:
    """Name of the run directory shared by every instance of one invocation.

    Falls back to the current timestamp when the directory has no name.
    """
    return instance.run_directory.name or datetime.now().strftime(RUN_DIRECTORY_FORMAT)
