"""InstancePreparer Protocol — per-instance worktree and prompt preparation."""

from typing import Protocol

from agent_eval.example.domain.instance import ScheduledInstance


class InstancePreparer(Protocol):
    """Readies one instance: worktree at the example revision, prompt on disk.

    Implementations mutate the shared cached repository and must not be
    called concurrently.
    """

    async def setup(self, instance: ScheduledInstance) -> None: ...
