"""Agent configuration model."""

from pydantic import BaseModel, Field


class AgentConfig(BaseModel, frozen=True):
    type: str = "claude_agent_sdk"
    max_turns: int | None = Field(default=None, ge=1)
    system_prompt: str | None = None
