"""Judge Protocol — structural interface for all judge implementations."""

from typing import Protocol

from agent_eval.agent.domain.result import RunOutput
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.judge.domain.score import JudgeOutput


class Judge(Protocol):
    """Grades one run. Called once per judge round, rounds run concurrently."""

    async def judge(
        self, instance: ScheduledInstance, run_output: RunOutput, round_index: int
    ) -> JudgeOutput: ...
