"""Anthropic Claude provider for the LLM client abstraction.

Wraps the async ``anthropic`` SDK to expose the ``complete`` interface
expected by :class:`~prompt_factory.core.llm.client.LLMClient`.
"""

from __future__ import annotations

from prompt_factory.core.llm.models import LLMCompletion
from prompt_factory.utils.exceptions import LLMError
from prompt_factory.utils.logging import get_logger

logger = get_logger("llm.anthropic")


class AnthropicProvider:
    """Provider implementation for Anthropic Claude models.

    Parameters
    ----------
    api_key:
        Anthropic API key.
    model:
        Model identifier, e.g. ``"claude-sonnet-4-6"``.
    """

    name = "anthropic"

    def __init__(self, api_key: str, model: str):
        try:
            import anthropic
        except ImportError as exc:
            raise LLMError(
                "anthropic",
                "The 'anthropic' package is not installed. "
                "Install it with: pip install anthropic",
            ) from exc

        if not api_key:
            raise LLMError("anthropic", "API key is required but was empty.")

        self.client = anthropic.AsyncAnthropic(api_key=api_key)
        self.model = model

    async def complete(
        self,
        system: str,
        user: str,
        temperature: float,
        max_tokens: int,
    ) -> LLMCompletion:
        """Call Claude and return the first text block with token usage."""
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except Exception as exc:
            logger.error("anthropic_complete_error", error=str(exc))
            raise LLMError(
                "anthropic", str(exc), status_code=getattr(exc, "status_code", None),
            ) from exc

        text = message.content[0].text if message.content else ""
        return LLMCompletion(
            text=text,
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
            provider=self.name,
            model=self.model,
        )
