"""EvalCompletedEvent — the telemetry record emitted once per successful judge round."""

from pydantic import BaseModel, Field

from agent_eval.agent.domain.tool_metrics import ToolMetrics
from agent_eval.agent.domain.usage import TokenUsage

EVENT_NAME = "Agent Eval Completed"


class EvalCompletedEvent(BaseModel, frozen=True):
    event: str = EVENT_NAME
    cohort_id: str = Field(min_length=1)
    session_id: str
    installation_id: str | None
    example_name: str
    round: int = Field(ge=0)
    diff_score: int
    diff_analysis: str
    thread_score: int | None = None
    thread_analysis: str | None = None
    tool_metrics: ToolMetrics
    response_count: int
    token_usage: TokenUsage
    model: str
    model_provider: str
    repository_url: str
    repository_revision: str
    diagnostics_before: int | None
    diagnostics_after: int | None
    commit_id: str
