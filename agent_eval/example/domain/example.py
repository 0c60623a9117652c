"""ExampleDefinition — one benchmark task as loaded from the examples directory."""

from pathlib import Path

from pydantic import BaseModel, Field


class RepositoryBase(BaseModel, frozen=True):
    """The source repository and revision an example starts from."""

    url: str = Field(min_length=1)
    revision: str = Field(min_length=1)
    language_extension: str | None = None


class ExampleDefinition(BaseModel, frozen=True):
    """Immutable benchmark task: where to start, what to ask, how to grade it."""

    name: str = Field(min_length=1)
    path: Path
    base: RepositoryBase
    prompt: str
    diff_criteria: str
    # Thread judging is optional; examples without criteria are judged on the diff only.
    thread_criteria: str | None = None

    @property
    def language(self) -> str | None:
        return self.base.language_extension
