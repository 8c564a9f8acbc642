"""Central registry mapping provider identifiers to adapters."""

from __future__ import annotations

from prompt_factory.core.adapters.base import BaseAdapter, ProviderMetadata
from prompt_factory.core.adapters.generic import GenericAdapter
from prompt_factory.core.adapters.media import FluxAdapter, StableDiffusionAdapter, VeoAdapter
from prompt_factory.core.adapters.text import (
    ChatGPTAdapter,
    ClaudeAdapter,
    GeminiAdapter,
    PerplexityAdapter,
)
from prompt_factory.core.models import AdaptedPrompt, GenericPrompt, ProviderCategory
from prompt_factory.utils.logging import get_logger

logger = get_logger(__name__)


class AdapterRegistry:
    """Registry of provider adapters, keyed by provider id.

    Typical lifecycle::

        registry = build_default_registry()
        adapted = registry.adapt(generic_prompt, "claude")

    New providers are added with :meth:`register`; nothing else needs to
    change for them to be picked up by :meth:`adapt`.
    """

    def __init__(self) -> None:
        self._adapters: dict[str, BaseAdapter] = {}

    # ------------------------------------------------------------------
    # Registration & lookup
    # ------------------------------------------------------------------

    def register(self, adapter: BaseAdapter) -> None:
        """Add *adapter*, replacing any adapter registered under the same id."""
        provider_id = adapter.metadata.id
        if provider_id in self._adapters:
            logger.warning("adapter_overwritten", provider_id=provider_id)
        self._adapters[provider_id] = adapter
        logger.debug("adapter_registered", provider_id=provider_id)

    def get(self, provider_id: str) -> BaseAdapter:
        """Return the adapter for *provider_id*, or a generic fallback."""
        adapter = self._adapters.get(provider_id)
        if adapter is None:
            return GenericAdapter(provider_id)
        return adapter

    def __contains__(self, provider_id: str) -> bool:
        return provider_id in self._adapters

    def list_all(self) -> list[ProviderMetadata]:
        return [adapter.metadata for adapter in self._adapters.values()]

    def list_by_category(self, category: ProviderCategory) -> list[ProviderMetadata]:
        return [meta for meta in self.list_all() if meta.category == category]

    def metadata_for(self, provider_id: str) -> ProviderMetadata:
        return self.get(provider_id).metadata

    # ------------------------------------------------------------------
    # Adaptation
    # ------------------------------------------------------------------

    def adapt(self, prompt: GenericPrompt, provider_id: str) -> AdaptedPrompt:
        if provider_id not in self._adapters:
            logger.info("adapter_fallback_generic", provider_id=provider_id)
        return self.get(provider_id).format(prompt)


def build_default_registry() -> AdapterRegistry:
    registry = AdapterRegistry()
    for adapter in (
        ClaudeAdapter(),
        ChatGPTAdapter(),
        GeminiAdapter(),
        PerplexityAdapter(),
        FluxAdapter(),
        StableDiffusionAdapter(),
        VeoAdapter(),
    ):
        registry.register(adapter)
    logger.info("adapters_registered", count=len(registry.list_all()))
    return registry
