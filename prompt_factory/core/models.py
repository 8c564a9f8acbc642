"""Data models for the prompt factory core.

``FormData`` is the flat record of user selections.  The assembler turns it
into a frozen ``GenericPrompt`` (PTCF structure) which provider adapters then
render as one ``AdaptedPrompt`` per target provider.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class TaskType(str, Enum):
    REDACTION = "redaction"
    ANALYSE = "analyse"
    CODE = "code"
    EXTRACTION = "extraction"
    CLASSIFICATION = "classification"
    TRADUCTION = "traduction"
    QA_RAG = "qa-rag"
    AGENT = "agent"
    BRAINSTORMING = "brainstorming"
    IMAGE_GEN = "image-gen"
    VIDEO_GEN = "video-gen"
    AUTRE = "autre"


class Complexity(str, Enum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class ProviderCategory(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"


TEXT_PROVIDERS = ("claude", "chatgpt", "gemini", "perplexity")
IMAGE_PROVIDERS = ("flux", "stable-diffusion")
VIDEO_PROVIDERS = ("veo",)

# Task types for which a step-by-step reasoning instruction is recommended.
COT_TASK_TYPES = ("code", "analyse", "classification", "agent", "extraction")


class _StrippedModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class FewShotExample(_StrippedModel):
    input: str = ""
    output: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.input and self.output)


class FollowUpAnswer(_StrippedModel):
    question: str
    answer: str


class ImageData(_StrippedModel):
    subject: str = ""
    style: str = ""
    lighting: str = ""
    composition: str = ""
    quality: str = "standard"  # "standard" | "high" | "masterpiece"
    negative: str = ""


class VideoData(_StrippedModel):
    subject: str = ""
    shot: str = ""
    tempo: str = ""
    style: str = ""


class FormData(_StrippedModel):
    """Everything the wizard collected, rebuilt before each generation."""

    target_models: list[str] = []
    task_type: str = ""
    custom_task_type: str = ""

    domain: str = ""
    audience: str = ""
    tone: str = ""
    output_language: str = ""

    task_description: str = ""
    input_description: str = ""
    output_format: str = "texte"
    constraints: str = ""

    complexity: Complexity = Complexity.BASIC
    output_length: str = "moyen"
    persona: str = ""
    chain_of_thought: bool = False
    few_shot_enabled: bool = True
    few_shot_examples: list[FewShotExample] = []

    image: ImageData | None = None
    video: VideoData | None = None
    follow_up_answers: list[FollowUpAnswer] = []

    @field_validator("domain", "audience", "tone", "output_language", mode="before")
    @classmethod
    def _join_multi_values(cls, value):
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v).strip() for v in value if str(v).strip())
        return value

    @property
    def usable_examples(self) -> list[FewShotExample]:
        if not self.few_shot_enabled:
            return []
        return [ex for ex in self.few_shot_examples if ex.is_complete]



class FormSnapshot(FormData):
    """Read-only copy of a form, held by :class:`GenericPrompt`."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, form: FormData) -> FormSnapshot:
        return cls.model_validate(form.model_dump())


class GenericPrompt(BaseModel):
    """Provider-independent PTCF structure produced by the assembler."""

    model_config = ConfigDict(frozen=True)

    persona: str
    task: str
    context: str
    format: str
    examples: tuple[FewShotExample, ...] = ()
    chain_of_thought: bool = False
    output_length: str = "moyen"
    form: FormSnapshot


class OptimizedPrompt(BaseModel):
    text: str
    notes: list[str] = []


class AdaptedPrompt(BaseModel):
    """A prompt rendered for one provider.

    The optimized variant returned by the rewrite service is attached to a
    copy so the original rendering stays available for comparison.
    """

    provider_id: str
    system_prompt: str = ""
    user_prompt: str = ""
    notes: list[str] = []
    optimized: OptimizedPrompt | None = None

    def with_optimized(self, text: str, notes: list[str] | None = None) -> AdaptedPrompt:
        return self.model_copy(
            update={"optimized": OptimizedPrompt(text=text, notes=list(notes or []))},
            deep=True,
        )


class ExtractedFields(BaseModel):
    """Form fields inferred from free text; ``None`` when not inferable."""

    domain: str | None = None
    audience: str | None = None
    tone: str | None = None
    output_language: str | None = None
    task_description: str | None = None
    input_description: str | None = None
    output_format: str | None = None
    constraints: str | None = None
    persona: str | None = None
    complexity: str | None = None


class ClarifyingQuestion(BaseModel):
    id: str
    question: str
    placeholder: str = ""
    type: str = "text"  # "text" | "textarea" | "choice"
    options: list[str] | None = None


# ---------------------------------------------------------------------------
# Provider selection helpers
# ---------------------------------------------------------------------------

def should_recommend_cot(task_type: str) -> bool:
    return task_type in COT_TASK_TYPES


def has_text_model(target_models: list[str]) -> bool:
    return any(m in TEXT_PROVIDERS for m in target_models)


def has_image_model(target_models: list[str]) -> bool:
    return any(m in IMAGE_PROVIDERS for m in target_models)


def has_video_model(target_models: list[str]) -> bool:
    return any(m in VIDEO_PROVIDERS for m in target_models)


def is_media_task(target_models: list[str]) -> bool:
    return has_image_model(target_models) or has_video_model(target_models)
