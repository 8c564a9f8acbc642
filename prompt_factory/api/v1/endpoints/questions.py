"""Clarifying questions endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from prompt_factory.api.v1.schemas.common import ErrorResponse
from prompt_factory.api.v1.schemas.llm import QuestionsRequest, QuestionsResponse
from prompt_factory.core.llm.client import LLMClientFactory
from prompt_factory.core.services.questions import QuestionGenerator
from prompt_factory.dependencies import get_llm_factory

router = APIRouter()


@router.post(
    "/questions",
    response_model=QuestionsResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed API key"},
        502: {"model": ErrorResponse, "description": "Upstream LLM failure"},
    },
    summary="Suggest clarifying questions for a form",
)
async def clarifying_questions(
    request: QuestionsRequest,
    factory: LLMClientFactory = Depends(get_llm_factory),
) -> QuestionsResponse:
    generator = QuestionGenerator(
        factory.build("questions", request.api_key, request.openai_key)
    )
    result = await generator.generate(request.form)
    return QuestionsResponse(**result.model_dump())
