"""TokenUsage value object — token counts from one agent run."""

from pydantic import BaseModel


class TokenUsage(BaseModel, frozen=True):
    """Immutable token counts reported by the agent for a whole run."""

    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return (
            self.input_tokens
            + self.output_tokens
            + self.cache_creation_input_tokens
            + self.cache_read_input_tokens
        )
