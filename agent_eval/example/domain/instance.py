"""ScheduledInstance — one (example, repetition) unit of work."""

from pathlib import Path

from pydantic import BaseModel, Field

from agent_eval.example.domain.example import ExampleDefinition

_RESET = "\033[0m"


class ScheduledInstance(BaseModel, frozen=True):
    """An ExampleDefinition bound to a repetition index and presentation metadata.

    Instances are independent: each gets its own worktree and output directory.
    """

    example: ExampleDefinition
    repetition_index: int = Field(ge=0)
    color: str
    name_width: int = Field(ge=0)
    run_directory: Path
    worktree_directory: Path

    @property
    def name(self) -> str:
        return instance_name(
            example_name=self.example.name, repetition_index=self.repetition_index
        )

    @property
    def output_directory(self) -> Path:
        return self.run_directory / self.name

    @property
    def log_prefix(self) -> str:
        return f"{self.color}{self.name:<{self.name_width}}{_RESET} | "


def instance_name(example_name: str, repetition_index: int) -> str:
    """The first repetition keeps the example name; later ones get a numeric suffix."""
    if repetition_index == 0:
        return example_name
    return f"{example_name}-{repetition_index}"
