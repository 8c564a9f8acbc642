"""Abstract base class for provider adapters."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from prompt_factory.core.models import AdaptedPrompt, GenericPrompt, ProviderCategory


class ProviderMetadata(BaseModel):
    """Identity and display information for a target provider."""

    id: str
    name: str
    description: str
    category: ProviderCategory = ProviderCategory.TEXT
    color: str = ""
    letter: str = ""


class BaseAdapter(ABC):
    """Base class that every provider adapter inherits from.

    An adapter is a pure formatting strategy: it receives the generic PTCF
    structure and returns the provider-specific rendering.  It must be total
    over its input and must not keep state between calls.
    """

    @property
    @abstractmethod
    def metadata(self) -> ProviderMetadata:
        ...

    @abstractmethod
    def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
        ...

    def _result(self, system_prompt: str, user_prompt: str, notes: list[str]) -> AdaptedPrompt:
        return AdaptedPrompt(
            provider_id=self.metadata.id,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            notes=notes,
        )


def bullet_lines(text: str) -> str:
    """Render multi-line free text as ``- `` bullets, one per line."""
    return "\n".join(f"- {line}" for line in text.split("\n"))
