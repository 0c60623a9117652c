"""LiteLLMModelResolver — resolves a model name to its provider and checks credentials."""

import litellm

from agent_eval.model.domain.model import ResolvedModel
from agent_eval.model.infrastructure.errors import (
    ModelAuthenticationError,
    ModelResolutionError,
)


class LiteLLMModelResolver:
    """Satisfies the ModelResolver protocol using LiteLLM's provider registry."""

    def resolve(self, name: str) -> ResolvedModel:
        """Return the resolved model, or raise before any work is scheduled.

        Raises:
            ModelResolutionError: if LiteLLM cannot map the name to a provider.
            ModelAuthenticationError: if the provider's credentials are missing.
        """
        try:
            model_id, provider, _, _ = litellm.get_llm_provider(model=name)
        except Exception as exc:
            raise ModelResolutionError(model=name, reason=str(exc)) from exc

        environment = litellm.validate_environment(model=name)
        if not environment.get("keys_in_environment", False):
            raise ModelAuthenticationError(
                model=name, missing_keys=list(environment.get("missing_keys", []))
            )

        return ResolvedModel(id=model_id, provider=provider)
