"""RunOutput value object — the outcome of one agent run against an instance."""

from pydantic import BaseModel, Field

from agent_eval.agent.domain.tool_metrics import ToolMetrics
from agent_eval.agent.domain.usage import TokenUsage


class RunOutput(BaseModel, frozen=True):
    """Immutable value object capturing everything the judges and the report need."""

    repository_diff: str
    thread_markdown: str
    response_count: int = Field(ge=0)
    token_usage: TokenUsage
    tool_metrics: ToolMetrics
    # None when no diagnostics command is configured for the example's language.
    diagnostics_before: int | None = None
    diagnostics_after: int | None = None
