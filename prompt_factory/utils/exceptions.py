class PromptFactoryError(Exception):
    """Base exception for the prompt factory service."""


class FormValidationError(PromptFactoryError):
    def __init__(self, issues: list):
        self.issues = issues
        fields = ", ".join(issue.field for issue in issues)
        super().__init__(f"Invalid form: {fields}")


class MissingCredentialsError(PromptFactoryError):
    def __init__(self, task: str):
        self.task = task
        super().__init__(f"No API key available for '{task}'")


class InvalidCredentialsError(PromptFactoryError):
    def __init__(self, provider: str, detail: str):
        self.provider = provider
        super().__init__(f"Invalid {provider} API key: {detail}")


class LLMError(PromptFactoryError):
    def __init__(self, provider: str, detail: str, status_code: int | None = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"LLM error ({provider}): {detail}")


class ResponseParseError(PromptFactoryError):
    def __init__(self, provider: str, detail: str):
        self.provider = provider
        super().__init__(f"Unparseable response from {provider}: {detail}")
