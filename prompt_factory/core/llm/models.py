from pydantic import BaseModel


class LLMCompletion(BaseModel):
    """Text returned by a provider, with token usage for display."""

    text: str
    input_tokens: int = 0
    output_tokens: int = 0
    provider: str
    model: str = ""
