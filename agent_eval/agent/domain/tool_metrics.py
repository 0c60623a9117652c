"""ToolMetrics — per-tool use and failure counts."""

from collections.abc import Iterable

from pydantic import BaseModel, Field

type ToolName = str


class ToolMetrics(BaseModel, frozen=True):
    """Immutable per-tool counters.

    ``merged`` sums counters key by key, so folding any permutation of the same
    set of metrics yields an equal value.
    """

    use_counts: dict[ToolName, int] = Field(default_factory=dict)
    failure_counts: dict[ToolName, int] = Field(default_factory=dict)

    @classmethod
    def from_calls(cls, calls: Iterable[tuple[ToolName, bool]]) -> "ToolMetrics":
        """Build metrics from (tool_name, succeeded) pairs."""
        use_counts: dict[ToolName, int] = {}
        failure_counts: dict[ToolName, int] = {}
        for tool_name, succeeded in calls:
            use_counts[tool_name] = use_counts.get(tool_name, 0) + 1
            if not succeeded:
                failure_counts[tool_name] = failure_counts.get(tool_name, 0) + 1
        return cls(use_counts=use_counts, failure_counts=failure_counts)

    def merged(self, other: "ToolMetrics") -> "ToolMetrics":
        return ToolMetrics(
            use_counts=_sum_counts(self.use_counts, other.use_counts),
            failure_counts=_sum_counts(self.failure_counts, other.failure_counts),
        )

    @property
    def tool_names(self) -> list[ToolName]:
        return sorted(self.use_counts)

    def failure_rate(self, tool_name: ToolName) -> float:
        uses = self.use_counts.get(tool_name, 0)
        if uses == 0:
            return 0.0
        return self.failure_counts.get(tool_name, 0) / uses


def _sum_counts(
    left: dict[ToolName, int], right: dict[ToolName, int]
) -> dict[ToolName, int]:
    return {
        key: left.get(key, 0) + right.get(key, 0)
        for key in sorted(left.keys() | right.keys())
    }
