from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # LLM keys -- requests may carry their own keys, these are the fallbacks
    anthropic_api_key: str = ""
    openai_api_key: str = ""

    # Per-task models
    extract_model: str = "claude-haiku-4-5-20251001"
    questions_model: str = "claude-sonnet-4-6"
    refine_model: str = "claude-sonnet-4-6"
    openai_model: str = "gpt-4.1-mini"

    # Per-task sampling
    extract_temperature: float = 0.0
    questions_temperature: float = 0.5
    refine_temperature: float = 0.3
    extract_max_tokens: int = 1024
    questions_max_tokens: int = 1024
    refine_max_tokens: int = 4096

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    allowed_origins: list[str] = [
        "https://prompt-factory-chi.vercel.app",
        "http://localhost:3000",
        "http://localhost:5500",
        "http://127.0.0.1:5500",
    ]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
