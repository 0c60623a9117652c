"""Agent Protocol — structural interface for all agent implementations."""

from typing import Protocol

from agent_eval.agent.domain.result import RunOutput
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.model.domain.model import ResolvedModel


class Agent(Protocol):
    """Runs a coding agent in an instance's prepared worktree.

    Implementations must be safe to call concurrently for different instances.
    """

    async def run(self, instance: ScheduledInstance, model: ResolvedModel) -> RunOutput: ...
