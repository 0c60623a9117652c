"""ModelResolver Protocol — resolves and authenticates a model before any work is scheduled."""

from typing import Protocol

from agent_eval.model.domain.model import ResolvedModel


class ModelResolver(Protocol):
    def resolve(self, name: str) -> ResolvedModel: ...
