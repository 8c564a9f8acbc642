"""Fallback adapter for provider identifiers with no dedicated formatter."""

from prompt_factory.core.adapters.base import BaseAdapter, ProviderMetadata
from prompt_factory.core.models import AdaptedPrompt, GenericPrompt, ProviderCategory

NO_OPTIMIZATION_NOTE = "Aucune optimisation specifique appliquee pour ce modele."


class GenericAdapter(BaseAdapter):
    """Returns persona and task unmodified."""

    def __init__(self, provider_id: str = "generic"):
        self._provider_id = provider_id

    @property
    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(
            id=self._provider_id,
            name=self._provider_id,
            description="Format generique",
            category=ProviderCategory.TEXT,
        )

    def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
        return self._result(prompt.persona, prompt.task, [NO_OPTIMIZATION_NOTE])
