import pytest

from prompt_factory.core.adapters.registry import build_default_registry
from prompt_factory.core.llm.models import LLMCompletion
from prompt_factory.core.models import FormData
from prompt_factory.utils.exceptions import LLMError


class FakeLLMClient:
    """Stands in for ``LLMClient``: returns canned replies, records calls."""

    def __init__(self, replies=None, provider="anthropic", model="fake-model", error=None):
        self.replies = list(replies or [])
        self.provider = provider
        self.model = model
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system, user):
        self.calls.append((system, user))
        if self.error is not None:
            raise self.error
        text = self.replies.pop(0) if self.replies else ""
        return LLMCompletion(
            text=text,
            input_tokens=100,
            output_tokens=50,
            provider=self.provider,
            model=self.model,
        )


class FakeLLMFactory:
    """Stands in for ``LLMClientFactory``; returns the same clients for every task."""

    def __init__(self, clients):
        self.clients = clients
        self.builds: list[tuple[str, str | None, str | None]] = []

    def build(self, task, api_key=None, openai_key=None):
        self.builds.append((task, api_key, openai_key))
        return self.clients


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def basic_form():
    return FormData(
        target_models=["claude"],
        task_type="redaction",
        domain="marketing",
        task_description="Write a tagline",
        output_format="texte",
        complexity="basic",
    )


@pytest.fixture
def full_form():
    return FormData(
        target_models=["claude", "chatgpt", "gemini", "perplexity"],
        task_type="analyse",
        domain="finance",
        audience=["business", "technical"],
        tone="formel",
        output_language="anglais",
        task_description="Analyse le rapport trimestriel",
        input_description="Un rapport PDF de 40 pages",
        output_format="markdown",
        constraints="Pas de jargon\nMaximum 500 mots",
        complexity="expert",
        output_length="long",
        chain_of_thought=True,
        few_shot_examples=[
            {"input": "CA en hausse de 10%", "output": "Croissance solide"},
            {"input": "", "output": "incomplet"},
        ],
    )


@pytest.fixture
def image_form():
    return FormData(
        target_models=["flux", "stable-diffusion"],
        task_type="image-gen",
        image={
            "subject": "a red fox in the snow",
            "style": "photorealistic",
            "lighting": "golden-hour",
            "composition": "close-up",
            "quality": "high",
        },
    )


@pytest.fixture
def llm_error():
    return LLMError("anthropic", "overloaded", status_code=529)


@pytest.fixture
def make_client():
    return FakeLLMClient


@pytest.fixture
def make_factory():
    return FakeLLMFactory
