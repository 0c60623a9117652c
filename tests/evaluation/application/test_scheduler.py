"""Tests for RunScheduler: bounded concurrency, judge fan-out and isolation."""

from agent_eval.evaluation.application.judging import JudgeAggregator
from agent_eval.evaluation.application.scheduler import RunScheduler
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.model.domain.model import ResolvedModel
from tests.agent.fake_agent import FakeAgent
from tests.evaluation.fake_observer import FakeEvaluationObserver
from tests.example.fake_examples import make_example, make_instance
from tests.judge.fake_judge import FakeJudge
from tests.telemetry.fake_sink import FakeTelemetrySink

MODEL = ResolvedModel(id="claude-3-7-sonnet-latest", provider="anthropic")


async def _commit_id() -> str:
    return ""


def _instances(count: int) -> list[ScheduledInstance]:
    return [make_instance(example=make_example(name=f"ex_{i}")) for i in range(count)]


def _scheduler(
    agent: FakeAgent,
    judge: FakeJudge | None = None,
    concurrency: int = 10,
    judge_repetitions: int = 3,
    observer: FakeEvaluationObserver | None = None,
    telemetry: FakeTelemetrySink | None = None,
) -> RunScheduler:
    obs = observer if observer is not None else FakeEvaluationObserver()
    aggregator = JudgeAggregator(
        judge=judge or FakeJudge(),
        telemetry=telemetry if telemetry is not None else FakeTelemetrySink(),
        commit_id=_commit_id,
        session_id="session-1",
        installation_id=None,
        observer=obs,
    )
    return RunScheduler(
        agent=agent,
        judge_aggregator=aggregator,
        concurrency=concurrency,
        judge_repetitions=judge_repetitions,
        observer=obs,
    )


class TestConcurrencyBound:
    """At most N agent runs are in flight at any moment."""

    async def test_runs_never_exceed_concurrency(self) -> None:
        agent = FakeAgent(delay_seconds=0.01)

        await _scheduler(agent=agent, concurrency=2).run_all(
            instances=_instances(6), model=MODEL
        )

        assert agent.max_in_flight == 2
        assert len(agent.runs) == 6

    async def test_concurrency_one_serialises_runs(self) -> None:
        agent = FakeAgent(delay_seconds=0.005)

        await _scheduler(agent=agent, concurrency=1).run_all(
            instances=_instances(3), model=MODEL
        )

        assert agent.max_in_flight == 1
        assert agent.runs == ["ex_0", "ex_1", "ex_2"]

    async def test_judge_rounds_of_one_run_overlap(self) -> None:
        judge = FakeJudge(delay_seconds=0.01)

        await _scheduler(
            agent=FakeAgent(), judge=judge, concurrency=1, judge_repetitions=3
        ).run_all(instances=_instances(1), model=MODEL)

        assert judge.max_in_flight == 3


class TestResults:
    async def test_results_in_submission_order(self) -> None:
        results = await _scheduler(agent=FakeAgent(delay_seconds=0.001)).run_all(
            instances=_instances(5), model=MODEL
        )

        assert [r.instance.name for r in results] == [f"ex_{i}" for i in range(5)]

    async def test_each_success_has_one_round_per_repetition(self) -> None:
        judge = FakeJudge()

        results = await _scheduler(
            agent=FakeAgent(), judge=judge, judge_repetitions=3
        ).run_all(instances=_instances(2), model=MODEL)

        assert [[r.round_index for r in res.judge_rounds] for res in results] == [
            [0, 1, 2],
            [0, 1, 2],
        ]
        assert len(judge.calls) == 6

    async def test_zero_judge_repetitions_skips_judging(self) -> None:
        judge = FakeJudge()

        results = await _scheduler(
            agent=FakeAgent(), judge=judge, judge_repetitions=0
        ).run_all(instances=_instances(1), model=MODEL)

        assert results[0].succeeded
        assert results[0].judge_rounds == []
        assert judge.calls == []


class TestIsolation:
    """A failure affects only its own run or round."""

    async def test_failed_run_is_recorded_and_never_judged(self) -> None:
        judge = FakeJudge()
        observer = FakeEvaluationObserver()

        results = await _scheduler(
            agent=FakeAgent(fail_instances={"ex_1"}), judge=judge, observer=observer
        ).run_all(instances=_instances(3), model=MODEL)

        assert [r.succeeded for r in results] == [True, False, True]
        assert "agent crashed on ex_1" in (results[1].error or "")
        assert results[1].judge_rounds == []
        assert all(name != "ex_1" for name, _ in judge.calls)
        assert observer.run_failed[0].instance == "ex_1"

    async def test_failed_judge_round_is_isolated(self) -> None:
        telemetry = FakeTelemetrySink()
        observer = FakeEvaluationObserver()

        results = await _scheduler(
            agent=FakeAgent(),
            judge=FakeJudge(fail_rounds={1}),
            judge_repetitions=3,
            observer=observer,
            telemetry=telemetry,
        ).run_all(instances=_instances(1), model=MODEL)

        rounds = results[0].judge_rounds
        assert [r.succeeded for r in rounds] == [True, False, True]
        assert results[0].succeeded
        assert len(telemetry.events) == 2
        assert observer.judged[0].succeeded_rounds == 2
        assert observer.judged[0].total_rounds == 3

    async def test_every_run_fails_still_returns_all_results(self) -> None:
        results = await _scheduler(
            agent=FakeAgent(fail_instances={"ex_0", "ex_1"})
        ).run_all(instances=_instances(2), model=MODEL)

        assert [r.succeeded for r in results] == [False, False]
