"""Field extraction endpoint: free text in, pre-filled form fields out."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from prompt_factory.api.v1.schemas.common import ErrorResponse
from prompt_factory.api.v1.schemas.llm import ExtractRequest, ExtractResponse
from prompt_factory.core.llm.client import LLMClientFactory
from prompt_factory.core.services.extraction import FieldExtractor
from prompt_factory.core.validation import merge_extracted
from prompt_factory.dependencies import get_llm_factory
from prompt_factory.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/extract",
    response_model=ExtractResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed API key"},
        502: {"model": ErrorResponse, "description": "Upstream LLM failure"},
    },
    summary="Extract form fields from free text",
)
async def extract_fields(
    request: ExtractRequest,
    factory: LLMClientFactory = Depends(get_llm_factory),
) -> ExtractResponse:
    extractor = FieldExtractor(
        factory.build("extract", request.api_key, request.openai_key)
    )

    if request.mode == "agent":
        result = await extractor.extract_agent(request.free_text, request.platform)
        return ExtractResponse(
            agent=result.agent,
            platform=result.platform,
            provider=result.provider,
            fallback=result.fallback,
            input_tokens=result.input_tokens,
            output_tokens=result.output_tokens,
        )

    models = request.models or (request.form.target_models if request.form else [])
    task_type = request.task_type or (request.form.task_type if request.form else "")
    result = await extractor.extract(request.free_text, task_type, models)

    merged = None
    if request.form is not None:
        merged = merge_extracted(request.form, result.extracted)

    return ExtractResponse(
        extracted=result.extracted,
        merged_form=merged,
        provider=result.provider,
        fallback=result.fallback,
        input_tokens=result.input_tokens,
        output_tokens=result.output_tokens,
    )
