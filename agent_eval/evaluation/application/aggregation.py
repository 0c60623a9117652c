"""Metrics aggregation — a sequential fold over settled RunResults."""

from collections.abc import Sequence

from agent_eval.agent.domain.tool_metrics import ToolMetrics
from agent_eval.evaluation.domain.run import RunResult
from agent_eval.evaluation.domain.summary import EvalSummary


def summarize(results: Sequence[RunResult]) -> EvalSummary:
    """Fold every RunResult into an EvalSummary.

    Only called after the scheduler has joined, so the fold needs no locking.
    Failed runs count as errors and contribute nothing else; failed judge
    rounds contribute nothing; rounds without a thread score contribute only
    their diff score.
    """
    tool_metrics = ToolMetrics()
    diff_scores: list[int] = []
    thread_scores: list[int] = []
    error_count = 0

    for result in results:
        if result.run_output is None:
            error_count += 1
            continue
        tool_metrics = tool_metrics.merged(result.run_output.tool_metrics)
        for judge_round in result.judge_rounds:
            if judge_round.output is None:
                continue
            diff_scores.append(judge_round.output.diff.score)
            if judge_round.output.thread is not None:
                thread_scores.append(judge_round.output.thread.score)

    return EvalSummary(
        total_instances=len(results),
        error_count=error_count,
        diff_scores=diff_scores,
        thread_scores=thread_scores,
        tool_metrics=tool_metrics,
    )
