"""LLM-backed services: field extraction, clarifying questions, rewriting."""

from prompt_factory.core.services.extraction import FieldExtractor
from prompt_factory.core.services.questions import QuestionGenerator
from prompt_factory.core.services.refiner import PromptRefiner

__all__ = ["FieldExtractor", "PromptRefiner", "QuestionGenerator"]
