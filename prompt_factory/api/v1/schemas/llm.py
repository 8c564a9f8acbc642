"""Request/response schemas for the LLM-backed endpoints (extract, questions,
refine).
"""

from typing import Literal

from pydantic import Field, model_validator

from prompt_factory.api.v1.schemas.common import CredentialsMixin, TokenUsage
from prompt_factory.core.models import (
    AdaptedPrompt,
    ClarifyingQuestion,
    ExtractedFields,
    FormData,
)
from prompt_factory.core.services.extraction import AgentFields


class ExtractRequest(CredentialsMixin):
    free_text: str = Field(..., min_length=1, max_length=20000)
    task_type: str = ""
    models: list[str] = []
    mode: Literal["form", "agent"] = "form"
    platform: str = "claude"
    form: FormData | None = Field(
        default=None,
        description="When given, extracted fields are merged into it without overwriting user input",
    )


class ExtractResponse(TokenUsage):
    extracted: ExtractedFields | None = None
    merged_form: FormData | None = None
    agent: AgentFields | None = None
    platform: str | None = None
    provider: str = ""
    fallback: bool = False


class QuestionsRequest(CredentialsMixin):
    form: FormData


class QuestionsResponse(TokenUsage):
    questions: list[ClarifyingQuestion]
    provider: str = ""
    fallback_questions: bool = False


class RefineRequest(CredentialsMixin):
    """Either a raw prompt text or a previously adapted prompt.

    With *adapted*, the response carries the adapted prompt with its
    optimized variant attached and a diff against the original.
    """

    raw_prompt: str | None = Field(default=None, max_length=50000)
    adapted: AdaptedPrompt | None = None
    target_provider: str = ""
    task_type: str = ""
    complexity: str = ""

    @model_validator(mode="after")
    def _require_prompt(self):
        if not (self.raw_prompt and self.raw_prompt.strip()) and self.adapted is None:
            raise ValueError("Either 'raw_prompt' or 'adapted' is required")
        return self


class RefineResponse(TokenUsage):
    optimized_prompt: str
    notes: list[str] = []
    model: str = ""
    provider: str = ""
    adapted: AdaptedPrompt | None = None
    diff: list[str] = []
