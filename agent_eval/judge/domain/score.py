"""JudgeScore / JudgeOutput — structured output from one judge invocation."""

from pydantic import BaseModel, ConfigDict, Field

MIN_SCORE = 0
MAX_SCORE = 5


class JudgeScore(BaseModel):
    """One scored aspect of a run, with the judge's reasoning.

    Also used as the structured response format requested from the judge model.
    """

    model_config = ConfigDict(frozen=True)

    analysis: str
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)


class JudgeOutput(BaseModel):
    """Immutable result of one judge round.

    ``thread`` is None when the example defines no thread criteria; that is a
    complete result, not a failure.
    """

    model_config = ConfigDict(frozen=True)

    diff: JudgeScore
    thread: JudgeScore | None = None
