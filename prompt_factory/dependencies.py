"""FastAPI dependency functions for injection into endpoint handlers.

The adapter registry is built once during the lifespan and stored on
``app.state``; it is simply looked up here.  The assembler and the LLM
client factory are cheap and created per call.  Tests replace
:func:`get_llm_factory` through ``app.dependency_overrides`` to avoid
network calls.
"""

from __future__ import annotations

from fastapi import Request

from prompt_factory.config import settings
from prompt_factory.core.adapters.registry import AdapterRegistry
from prompt_factory.core.assembler import PromptAssembler
from prompt_factory.core.llm.client import LLMClientFactory


def get_adapter_registry(request: Request) -> AdapterRegistry:
    """Return the global adapter registry stored on ``app.state``."""
    return request.app.state.adapter_registry


def get_assembler() -> PromptAssembler:
    return PromptAssembler()


def get_llm_factory() -> LLMClientFactory:
    """Return a client factory bound to the configured settings."""
    return LLMClientFactory(settings)
