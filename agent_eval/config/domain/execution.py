"""Execution configuration model."""

from pydantic import BaseModel, Field


class ExecutionConfig(BaseModel, frozen=True):
    repetitions: int = Field(default=1, ge=1)
    judge_repetitions: int = Field(default=3, ge=0)
    concurrency: int = Field(default=10, ge=1)
