"""SetupSequencer — prepares instances strictly one after another."""

from collections.abc import Sequence

from agent_eval.evaluation.domain.observer import EvaluationObserver
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.repository.domain.preparer import InstancePreparer


class SetupSequencer:
    """Runs every instance's preparation in instance order, one at a time.

    Preparation mutates the shared cached repository (fetches, worktree
    registration), so this is a plain loop rather than a pool: do not
    parallelise it. The first failure propagates and aborts the evaluation.
    """

    def __init__(self, preparer: InstancePreparer, observer: EvaluationObserver) -> None:
        self._preparer = preparer
        self._observer = observer

    async def setup_all(self, instances: Sequence[ScheduledInstance]) -> None:
        for instance in instances:
            self._observer.instance_setup_started(instance=instance.name)
            await self._preparer.setup(instance=instance)
            self._observer.instance_setup_completed(instance=instance.name)
