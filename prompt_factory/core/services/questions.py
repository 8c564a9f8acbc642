"""Clarifying-questions service.

Sends a compact summary of the form to an LLM and returns the questions it
suggests.  Answers are folded back into the form as ``follow_up_answers``
(see :func:`~prompt_factory.core.validation.fold_answers`).
"""

from __future__ import annotations

import json

from pydantic import BaseModel

from prompt_factory.core.llm.parsing import parse_json_response
from prompt_factory.core.models import ClarifyingQuestion, FormData
from prompt_factory.core.prompts.questions import (
    FALLBACK_QUESTIONS,
    QUESTIONS_SYSTEM_PROMPT,
    QUESTIONS_USER_TEMPLATE,
)
from prompt_factory.core.services.base import LLMService
from prompt_factory.utils.logging import get_logger

logger = get_logger("services.questions")

_QUESTION_TYPES = ("text", "textarea", "choice")


class QuestionsResult(BaseModel):
    questions: list[ClarifyingQuestion] = []
    input_tokens: int = 0
    output_tokens: int = 0
    provider: str = ""
    fallback_questions: bool = False


def summarize_form(form: FormData) -> dict:
    """Compact, null-for-empty view of the form sent to the model."""
    return {
        "modeles": form.target_models,
        "tache": form.task_type or None,
        "tacheCustom": form.custom_task_type or None,
        "domaine": form.domain or None,
        "audience": form.audience or None,
        "ton": form.tone or None,
        "langue": form.output_language or None,
        "description": form.task_description or None,
        "inputDescription": form.input_description or None,
        "formatSortie": form.output_format or None,
        "contraintes": form.constraints or None,
        "complexite": form.complexity.value,
        "persona": form.persona or None,
        "fewShot": bool(form.usable_examples),
        "chainOfThought": form.chain_of_thought,
    }


class QuestionGenerator(LLMService):
    """Generates :class:`ClarifyingQuestion` records for a form."""

    async def generate(self, form: FormData) -> QuestionsResult:
        summary = json.dumps(summarize_form(form), ensure_ascii=False, indent=2)
        user_msg = QUESTIONS_USER_TEMPLATE.format(summary=summary)
        completion, _ = await self._complete(QUESTIONS_SYSTEM_PROMPT, user_msg)

        questions = self._parse_questions(completion.text)
        used_fallback = questions is None
        if used_fallback:
            questions = [ClarifyingQuestion(**q) for q in FALLBACK_QUESTIONS]

        logger.info(
            "questions_generated",
            count=len(questions),
            provider=completion.provider,
            fallback_questions=used_fallback,
        )
        return QuestionsResult(
            questions=questions,
            input_tokens=completion.input_tokens,
            output_tokens=completion.output_tokens,
            provider=completion.provider,
            fallback_questions=used_fallback,
        )

    def _parse_questions(self, text: str) -> list[ClarifyingQuestion] | None:
        try:
            data = parse_json_response(text)
        except json.JSONDecodeError as exc:
            logger.warning("questions_parse_failed", error=str(exc), raw=text[:200])
            return None

        # Some replies wrap the array: {"questions": [...]}
        if isinstance(data, dict):
            data = data.get("questions")
        if not isinstance(data, list):
            return None

        # Answers are keyed by id, so ids must be unique.
        taken = {
            str(item["id"]) for item in data
            if isinstance(item, dict) and item.get("id")
        }
        seen: set[str] = set()

        def next_free_id(position: int) -> str:
            n = position
            while f"q{n}" in taken or f"q{n}" in seen:
                n += 1
            return f"q{n}"

        questions: list[ClarifyingQuestion] = []
        for position, item in enumerate(data, start=1):
            if not isinstance(item, dict):
                continue
            text_value = str(item.get("question") or "").strip()
            if not text_value:
                continue

            q_type = item.get("type") if item.get("type") in _QUESTION_TYPES else "text"
            options = item.get("options")
            if isinstance(options, list):
                options = [str(o) for o in options if str(o).strip()]
            else:
                options = None
            if q_type == "choice" and not options:
                q_type = "text"
            if q_type != "choice":
                options = None

            q_id = str(item.get("id") or "")
            if not q_id or q_id in seen:
                q_id = next_free_id(position)
            seen.add(q_id)

            questions.append(ClarifyingQuestion(
                id=q_id,
                question=text_value,
                placeholder=str(item.get("placeholder") or ""),
                type=q_type,
                options=options,
            ))
        return questions
