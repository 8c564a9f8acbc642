"""Prompt rewrite endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from prompt_factory.api.v1.schemas.common import ErrorResponse
from prompt_factory.api.v1.schemas.llm import RefineRequest, RefineResponse
from prompt_factory.core.llm.client import LLMClientFactory
from prompt_factory.core.rendering import diff_prompts, raw_prompt
from prompt_factory.core.services.refiner import PromptRefiner
from prompt_factory.dependencies import get_llm_factory

router = APIRouter()


@router.post(
    "/refine",
    response_model=RefineResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed API key"},
        502: {"model": ErrorResponse, "description": "Upstream LLM failure"},
    },
    summary="Rewrite a prompt with an LLM",
    description=(
        "Send either raw prompt text or an adapted prompt.  For an adapted "
        "prompt the original is kept and the optimized text is attached to a "
        "copy, together with a unified diff."
    ),
)
async def refine_prompt(
    request: RefineRequest,
    factory: LLMClientFactory = Depends(get_llm_factory),
) -> RefineResponse:
    refiner = PromptRefiner(
        factory.build("refine", request.api_key, request.openai_key)
    )

    if request.adapted is None:
        result = await refiner.refine(
            request.raw_prompt,
            request.target_provider,
            request.task_type,
            request.complexity,
        )
        return RefineResponse(**result.model_dump())

    adapted = request.adapted
    result = await refiner.refine(
        raw_prompt(adapted),
        request.target_provider or adapted.provider_id,
        request.task_type,
        request.complexity,
    )
    optimized = adapted.with_optimized(result.optimized_prompt, result.notes)
    return RefineResponse(
        **result.model_dump(),
        adapted=optimized,
        diff=diff_prompts(optimized),
    )
