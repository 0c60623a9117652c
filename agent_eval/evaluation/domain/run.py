"""RunResult — the outcome of one scheduled instance: run failure or run + judge rounds."""

from pydantic import BaseModel, Field

from agent_eval.agent.domain.result import RunOutput
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.judge.domain.score import JudgeOutput

RUN_DIRECTORY_FORMAT = "%Y-%m-%d_%H-%M-%S"


class JudgeRound(BaseModel, frozen=True):
    """One judge attempt: exactly one of output or error is set."""

    round_index: int = Field(ge=0)
    output: JudgeOutput | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.output is not None


class RunResult(BaseModel, frozen=True):
    """Immutable record of one instance after its run and judge rounds settled.

    A failed run carries ``error`` and no judge rounds; a successful one carries
    ``run_output`` and one JudgeRound per requested round, in round order.
    """

    instance: ScheduledInstance
    run_output: RunOutput | None = None
    judge_rounds: list[JudgeRound] = Field(default_factory=list)
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.run_output is not None

    @classmethod
    def failed(cls, instance: ScheduledInstance, error: str) -> "RunResult":
        return cls(instance=instance, error=error)

    @classmethod
    def completed(
        cls,
        instance: ScheduledInstance,
        run_output: RunOutput,
        judge_rounds: list[JudgeRound],
    ) -> "RunResult":
        return cls(instance=instance, run_output=run_output, judge_rounds=judge_rounds)
