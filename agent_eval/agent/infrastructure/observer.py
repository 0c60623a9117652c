"""Structlog implementation of the AgentObserver port."""

import structlog


class StructlogAgentObserver:
    """Delegates agent domain events to structlog.

    Satisfies the AgentObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def agent_run_started(self, instance: str, model: str, worktree: str) -> None:
        self._log.info(
            "agent.run_started",
            instance=instance,
            model=model,
            worktree=worktree,
        )

    def agent_tool_used(self, instance: str, tool_name: str, succeeded: bool) -> None:
        self._log.debug(
            "agent.tool_used",
            instance=instance,
            tool_name=tool_name,
            succeeded=succeeded,
        )

    def agent_run_completed(
        self,
        instance: str,
        response_count: int,
        total_tokens: int,
        cost_usd: float | None,
    ) -> None:
        self._log.info(
            "agent.run_completed",
            instance=instance,
            response_count=response_count,
            total_tokens=total_tokens,
            cost_usd=cost_usd,
        )

    def agent_run_failed(self, instance: str, reason: str) -> None:
        self._log.error("agent.run_failed", instance=instance, reason=reason)

    def agent_diagnostics_counted(
        self, instance: str, phase: str, count: int | None
    ) -> None:
        self._log.info(
            "agent.diagnostics_counted",
            instance=instance,
            phase=phase,
            count=count,
        )
