"""Observer port for the agent domain — defines events in domain language."""

from typing import Protocol


class AgentObserver(Protocol):
    def agent_run_started(self, instance: str, model: str, worktree: str) -> None: ...

    def agent_tool_used(self, instance: str, tool_name: str, succeeded: bool) -> None: ...

    def agent_run_completed(
        self,
        instance: str,
        response_count: int,
        total_tokens: int,
        cost_usd: float | None,
    ) -> None: ...

    def agent_run_failed(self, instance: str, reason: str) -> None: ...

    def agent_diagnostics_counted(
        self, instance: str, phase: str, count: int | None
    ) -> None: ...
