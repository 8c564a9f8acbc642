"""Provider adapters -- registry, base class and built-in formatters."""

from prompt_factory.core.adapters.base import BaseAdapter, ProviderMetadata
from prompt_factory.core.adapters.generic import GenericAdapter
from prompt_factory.core.adapters.media import FluxAdapter, StableDiffusionAdapter, VeoAdapter
from prompt_factory.core.adapters.registry import AdapterRegistry, build_default_registry
from prompt_factory.core.adapters.text import (
    ChatGPTAdapter,
    ClaudeAdapter,
    GeminiAdapter,
    PerplexityAdapter,
)

__all__ = [
    "AdapterRegistry",
    "BaseAdapter",
    "ChatGPTAdapter",
    "ClaudeAdapter",
    "FluxAdapter",
    "GeminiAdapter",
    "GenericAdapter",
    "PerplexityAdapter",
    "ProviderMetadata",
    "StableDiffusionAdapter",
    "VeoAdapter",
    "build_default_registry",
]
