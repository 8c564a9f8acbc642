"""Common request/response schemas used across API endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response returned by all endpoints on failure."""

    error: str
    detail: str = ""
    issues: list[dict] | None = None


class CredentialsMixin(BaseModel):
    """Optional per-request keys; configured keys are used when omitted."""

    api_key: str | None = Field(default=None, description="Anthropic API key (sk-ant-...)")
    openai_key: str | None = Field(default=None, description="OpenAI API key used as fallback")


class TokenUsage(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0
