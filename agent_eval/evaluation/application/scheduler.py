"""RunScheduler — bounded-concurrency agent runs, each fanning out to its judge rounds."""

import asyncio
from collections.abc import Sequence

from agent_eval.agent.domain.agent import Agent
from agent_eval.evaluation.application.judging import JudgeAggregator
from agent_eval.evaluation.domain.observer import EvaluationObserver
from agent_eval.evaluation.domain.run import RunResult
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.model.domain.model import ResolvedModel


class RunScheduler:
    """Executes one unit of work per instance.

    A semaphore admits at most ``concurrency`` units at a time; waiting units
    are admitted in submission order. Inside an admitted unit the agent runs
    once and, if it succeeds, ``judge_repetitions`` judge rounds run together
    with ``asyncio.gather``. Judge rounds are not counted against the bound.
    A failing unit never cancels its siblings.
    """

    def __init__(
        self,
        agent: Agent,
        judge_aggregator: JudgeAggregator,
        concurrency: int,
        judge_repetitions: int,
        observer: EvaluationObserver,
    ) -> None:
        self._agent = agent
        self._judge_aggregator = judge_aggregator
        self._concurrency = concurrency
        self._judge_repetitions = judge_repetitions
        self._observer = observer

    async def run_all(
        self, instances: Sequence[ScheduledInstance], model: ResolvedModel
    ) -> list[RunResult]:
        """Run every instance and return the results in submission order."""
        sem = asyncio.Semaphore(self._concurrency)
        async with asyncio.TaskGroup() as tg:
            tasks = [
                tg.create_task(self._run_unit(sem=sem, instance=instance, model=model))
                for instance in instances
            ]
        return [task.result() for task in tasks]

    async def _run_unit(
        self,
        sem: asyncio.Semaphore,
        instance: ScheduledInstance,
        model: ResolvedModel,
    ) -> RunResult:
        async with sem:
            example = instance.example.name
            self._observer.instance_run_started(instance=instance.name, example=example)
            try:
                run_output = await self._agent.run(instance=instance, model=model)
            except Exception as exc:  # noqa: BLE001
                self._observer.instance_run_failed(
                    instance=instance.name, example=example, reason=str(exc)
                )
                return RunResult.failed(instance=instance, error=str(exc))
            self._observer.instance_run_completed(instance=instance.name, example=example)

            judge_rounds = await asyncio.gather(
                *(
                    self._judge_aggregator.judge_round(
                        instance=instance,
                        run_output=run_output,
                        round_index=round_index,
                        model=model,
                    )
                    for round_index in range(self._judge_repetitions)
                )
            )
            self._observer.instance_judged(
                instance=instance.name,
                example=example,
                succeeded_rounds=sum(1 for r in judge_rounds if r.succeeded),
                total_rounds=len(judge_rounds),
            )
            return RunResult.completed(
                instance=instance, run_output=run_output, judge_rounds=list(judge_rounds)
            )
