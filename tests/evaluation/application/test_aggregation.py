"""Tests for summarize: the sequential fold over settled results."""

import itertools

import pytest

from agent_eval.agent.domain.tool_metrics import ToolMetrics
from agent_eval.evaluation.application.aggregation import summarize
from agent_eval.evaluation.domain.run import JudgeRound, RunResult
from agent_eval.judge.domain.score import JudgeOutput, JudgeScore
from tests.agent.fake_agent import make_run_output
from tests.example.fake_examples import make_example, make_instance


def _round(index: int, diff: int, thread: int | None = None) -> JudgeRound:
    return JudgeRound(
        round_index=index,
        output=JudgeOutput(
            diff=JudgeScore(analysis="d", score=diff),
            thread=JudgeScore(analysis="t", score=thread) if thread is not None else None,
        ),
    )


def _completed(
    name: str, rounds: list[JudgeRound], metrics: ToolMetrics | None = None
) -> RunResult:
    return RunResult.completed(
        instance=make_instance(example=make_example(name=name)),
        run_output=make_run_output(tool_metrics=metrics),
        judge_rounds=rounds,
    )


def _failed(name: str) -> RunResult:
    return RunResult.failed(
        instance=make_instance(example=make_example(name=name)), error="boom"
    )


class TestScores:
    def test_diff_and_thread_scores_collected(self) -> None:
        summary = summarize(
            [_completed("a", [_round(0, 4, 5), _round(1, 2, 3)])]
        )

        assert summary.diff_scores == [4, 2]
        assert summary.thread_scores == [5, 3]
        assert summary.average_diff_score == pytest.approx(3.0)
        assert summary.average_thread_score == pytest.approx(4.0)

    def test_thread_average_only_over_rounds_that_report_one(self) -> None:
        summary = summarize(
            [
                _completed("a", [_round(0, 4, 2)]),
                _completed("b", [_round(0, 2)]),
            ]
        )

        assert summary.average_diff_score == pytest.approx(3.0)
        assert summary.average_thread_score == pytest.approx(2.0)

    def test_failed_rounds_contribute_nothing(self) -> None:
        summary = summarize(
            [_completed("a", [_round(0, 5), JudgeRound(round_index=1, error="x")])]
        )

        assert summary.diff_scores == [5]

    def test_no_scores_gives_no_averages(self) -> None:
        summary = summarize([_completed("a", [])])

        assert summary.average_diff_score is None
        assert summary.average_thread_score is None


class TestErrors:
    def test_failed_runs_are_counted(self) -> None:
        summary = summarize([_failed("a"), _completed("b", [_round(0, 3)]), _failed("c")])

        assert summary.error_count == 2
        assert summary.total_instances == 3
        assert summary.diff_scores == [3]

    def test_all_failed(self) -> None:
        summary = summarize([_failed("a")])

        assert summary.error_count == 1
        assert summary.average_diff_score is None
        assert summary.tool_metrics == ToolMetrics()


class TestToolMetrics:
    def test_merged_over_successful_runs(self) -> None:
        summary = summarize(
            [
                _completed("a", [], ToolMetrics.from_calls([("read", True), ("edit", False)])),
                _failed("b"),
                _completed("c", [], ToolMetrics.from_calls([("read", False)])),
            ]
        )

        assert summary.tool_metrics.use_counts == {"edit": 1, "read": 2}
        assert summary.tool_metrics.failure_counts == {"edit": 1, "read": 1}

    def test_fold_is_order_independent(self) -> None:
        results = [
            _completed("a", [_round(0, 1)], ToolMetrics.from_calls([("read", True)])),
            _completed("b", [_round(0, 5)], ToolMetrics.from_calls([("grep", False)])),
            _completed("c", [_round(0, 3)], ToolMetrics.from_calls([("read", False)])),
        ]

        summaries = [summarize(list(p)) for p in itertools.permutations(results)]

        assert all(s.tool_metrics == summaries[0].tool_metrics for s in summaries)
        assert all(s.average_diff_score == summaries[0].average_diff_score for s in summaries)
