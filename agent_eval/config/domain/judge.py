"""Judge configuration model."""

from pydantic import BaseModel


class JudgeConfig(BaseModel, frozen=True):
    # None means "judge with the same model the agent runs on".
    model: str | None = None
    temperature: float = 0.0
