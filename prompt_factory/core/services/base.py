"""Shared plumbing for services that call a third-party LLM."""

from __future__ import annotations

from prompt_factory.core.llm.client import LLMClient
from prompt_factory.core.llm.models import LLMCompletion
from prompt_factory.utils.exceptions import LLMError
from prompt_factory.utils.logging import get_logger

logger = get_logger("services")


class LLMService:
    """Base class holding the ordered list of clients to try.

    Parameters
    ----------
    clients:
        Clients in priority order.  When a call fails, the next client is
        tried; the last failure propagates.
    """

    def __init__(self, clients: list[LLMClient]):
        if not clients:
            raise ValueError("At least one LLM client is required")
        self.clients = clients

    async def _complete(self, system: str, user: str) -> tuple[LLMCompletion, bool]:
        """Return the first successful completion and whether a fallback answered."""
        last_error: LLMError | None = None
        for index, client in enumerate(self.clients):
            try:
                completion = await client.complete(system, user)
                return completion, index > 0
            except LLMError as exc:
                last_error = exc
                if index + 1 < len(self.clients):
                    logger.warning(
                        "llm_call_failed_trying_fallback",
                        provider=client.provider,
                        error=str(exc),
                    )
        assert last_error is not None
        raise last_error
