"""OpenAI provider for the LLM client abstraction.

Wraps the async ``openai`` SDK to expose the ``complete`` interface expected
by :class:`~prompt_factory.core.llm.client.LLMClient`.
"""

from __future__ import annotations

from prompt_factory.core.llm.models import LLMCompletion
from prompt_factory.utils.exceptions import LLMError
from prompt_factory.utils.logging import get_logger

logger = get_logger("llm.openai")


class OpenAIProvider:
    """Provider implementation for OpenAI chat models.

    Parameters
    ----------
    api_key:
        OpenAI API key.
    model:
        Model identifier, e.g. ``"gpt-4.1-mini"``.
    """

    name = "openai"

    def __init__(self, api_key: str, model: str):
        try:
            import openai
        except ImportError as exc:
            raise LLMError(
                "openai",
                "The 'openai' package is not installed. "
                "Install it with: pip install openai",
            ) from exc

        if not api_key:
            raise LLMError("openai", "API key is required but was empty.")

        self.client = openai.AsyncOpenAI(api_key=api_key)
        self.model = model

    async def complete(
        self,
        system: str,
        user: str,
        temperature: float,
        max_tokens: int,
    ) -> LLMCompletion:
        """Call the chat completions API and return the text with token usage."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                max_completion_tokens=max_tokens,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except Exception as exc:
            logger.error("openai_complete_error", error=str(exc))
            raise LLMError(
                "openai", str(exc), status_code=getattr(exc, "status_code", None),
            ) from exc

        choice = response.choices[0] if response.choices else None
        text = ""
        if choice and choice.message and choice.message.content:
            text = choice.message.content
        usage = response.usage
        return LLMCompletion(
            text=text,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            provider=self.name,
            model=self.model,
        )
