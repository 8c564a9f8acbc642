"""High-level LLM client abstraction.

Provides a unified interface over the providers used by the rewrite,
extraction and clarifying-question services:

  - ``anthropic`` -- Anthropic Claude (primary)
  - ``openai`` -- OpenAI GPT (fallback)

:class:`LLMClientFactory` turns the configured settings plus any keys sent
with a request into the ordered list of clients a service should try.
"""

from __future__ import annotations

from prompt_factory.config import Settings
from prompt_factory.core.llm.models import LLMCompletion
from prompt_factory.utils.exceptions import (
    InvalidCredentialsError,
    LLMError,
    MissingCredentialsError,
)
from prompt_factory.utils.logging import get_logger

SUPPORTED_PROVIDERS = ("anthropic", "openai")

ANTHROPIC_KEY_PREFIX = "sk-ant-"


class LLMClient:
    """Unified LLM client that delegates to a provider-specific backend.

    Parameters
    ----------
    provider:
        Provider name -- ``"anthropic"`` or ``"openai"``.
    api_key:
        API key for the chosen provider.
    model:
        Model identifier (e.g. ``"claude-sonnet-4-6"``, ``"gpt-4.1-mini"``).
    temperature, max_tokens:
        Sampling settings applied to every call made through this client.
    """

    def __init__(
        self,
        provider: str,
        api_key: str,
        model: str,
        temperature: float = 0.0,
        max_tokens: int = 1024,
    ):
        self.provider = provider
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.logger = get_logger("llm")
        self._provider_client = self._init_provider()

    def _init_provider(self):
        """Instantiate the appropriate provider backend."""
        if self.provider == "anthropic":
            from prompt_factory.core.llm.providers.anthropic_provider import AnthropicProvider

            return AnthropicProvider(self.api_key, self.model)

        if self.provider == "openai":
            from prompt_factory.core.llm.providers.openai_provider import OpenAIProvider

            return OpenAIProvider(self.api_key, self.model)

        raise LLMError(
            self.provider,
            f"Unknown provider: {self.provider}. "
            f"Supported: {', '.join(SUPPORTED_PROVIDERS)}",
        )

    async def complete(self, system: str, user: str) -> LLMCompletion:
        """Send a system + user message pair and return the completion.

        Raises :class:`LLMError` on provider failures.
        """
        self.logger.info(
            "llm_complete",
            provider=self.provider,
            model=self.model,
            system_len=len(system),
            user_len=len(user),
        )
        try:
            result = await self._provider_client.complete(
                system, user, self.temperature, self.max_tokens,
            )
        except LLMError:
            raise
        except Exception as exc:
            self.logger.error("llm_complete_error", error=str(exc))
            raise LLMError(self.provider, str(exc)) from exc

        self.logger.info(
            "llm_complete_success",
            response_len=len(result.text),
            input_tokens=result.input_tokens,
            output_tokens=result.output_tokens,
        )
        return result


class LLMClientFactory:
    """Builds the ordered client list for each service task.

    Keys sent with a request take precedence over configured keys.  The
    Anthropic client comes first; the OpenAI client, when a key exists, is
    the fallback.
    """

    TASKS = ("extract", "questions", "refine")

    def __init__(self, settings: Settings):
        self.settings = settings

    def build(
        self,
        task: str,
        api_key: str | None = None,
        openai_key: str | None = None,
    ) -> list[LLMClient]:
        if task not in self.TASKS:
            raise ValueError(f"Unknown LLM task: {task}")

        anthropic_key = (api_key or self.settings.anthropic_api_key).strip()
        openai_key = (openai_key or self.settings.openai_api_key).strip()

        if anthropic_key and not anthropic_key.startswith(ANTHROPIC_KEY_PREFIX):
            raise InvalidCredentialsError(
                "anthropic", f"key must start with '{ANTHROPIC_KEY_PREFIX}'",
            )

        model = getattr(self.settings, f"{task}_model")
        temperature = getattr(self.settings, f"{task}_temperature")
        max_tokens = getattr(self.settings, f"{task}_max_tokens")

        clients: list[LLMClient] = []
        if anthropic_key:
            clients.append(
                LLMClient("anthropic", anthropic_key, model, temperature, max_tokens)
            )
        if openai_key:
            clients.append(
                LLMClient(
                    "openai", openai_key, self.settings.openai_model, temperature, max_tokens,
                )
            )

        if not clients:
            raise MissingCredentialsError(task)
        return clients
