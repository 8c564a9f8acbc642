"""Request/response schemas for prompt generation and form validation."""

from pydantic import BaseModel, Field

from prompt_factory.core.adapters.base import ProviderMetadata
from prompt_factory.core.models import AdaptedPrompt, ClarifyingQuestion, FormData
from prompt_factory.core.validation import ValidationIssue


class ProvidersResponse(BaseModel):
    providers: list[ProviderMetadata]


class ValidationResponse(BaseModel):
    valid: bool
    issues: list[ValidationIssue] = []
    cot_recommended: bool = False


class GenerateRequest(BaseModel):
    """Form to turn into prompts, plus optional post-wizard adjustments.

    * *feedback* is appended to the constraints before assembly.
    * *answers* maps clarifying question ids to the user's answers; only
      questions listed in *questions* are considered.
    """

    form: FormData
    feedback: str = ""
    questions: list[ClarifyingQuestion] = []
    answers: dict[str, str] = {}


class GenericPromptView(BaseModel):
    persona: str
    task: str
    context: str
    format: str


class ProviderPrompt(BaseModel):
    provider: ProviderMetadata
    adapted: AdaptedPrompt
    preview: str = Field(..., description="Markdown preview document")
    raw: str = Field(..., description="Plain text for copy/download")
    estimated_tokens: int
    filename: str


class GenerateResponse(BaseModel):
    generic: GenericPromptView
    prompts: list[ProviderPrompt]
