"""EvalSummary and EvaluationReport — the aggregate result of a completed evaluation."""

import statistics
from pathlib import Path

from pydantic import BaseModel, Field

from agent_eval.agent.domain.tool_metrics import ToolMetrics
from agent_eval.evaluation.domain.run import RunResult
from agent_eval.model.domain.model import ResolvedModel


class EvalSummary(BaseModel, frozen=True):
    """Scores and tool metrics folded from every RunResult of one evaluation."""

    total_instances: int = Field(ge=0)
    error_count: int = Field(ge=0)
    diff_scores: list[int]
    thread_scores: list[int]
    tool_metrics: ToolMetrics

    @property
    def average_diff_score(self) -> float | None:
        return _mean(self.diff_scores)

    @property
    def average_thread_score(self) -> float | None:
        return _mean(self.thread_scores)


class EvaluationReport(BaseModel, frozen=True):
    """Everything the reporter needs, with results in submission order."""

    run_id: str = Field(min_length=1)
    run_directory: Path
    model: ResolvedModel
    name_width: int = Field(ge=0)
    results: list[RunResult]
    summary: EvalSummary


def _mean(values: list[int]) -> float | None:
    if not values:
        return None
    return float(statistics.mean(values))
