"""ResolvedModel — a language model the harness verified it can call."""

from pydantic import BaseModel, Field


class ResolvedModel(BaseModel, frozen=True):
    id: str = Field(min_length=1)
    provider: str = Field(min_length=1)

    @property
    def telemetry_id(self) -> str:
        return f"{self.provider}/{self.id}"
