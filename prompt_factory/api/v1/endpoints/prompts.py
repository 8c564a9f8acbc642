"""Prompt generation endpoints: validate a form, then assemble and adapt it
for every selected provider.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from prompt_factory.api.v1.schemas.common import ErrorResponse
from prompt_factory.api.v1.schemas.prompts import (
    GenerateRequest,
    GenerateResponse,
    GenericPromptView,
    ProviderPrompt,
    ValidationResponse,
)
from prompt_factory.core.adapters.registry import AdapterRegistry
from prompt_factory.core.assembler import PromptAssembler
from prompt_factory.core.models import FormData, should_recommend_cot
from prompt_factory.core.rendering import (
    estimate_tokens,
    export_filename,
    raw_prompt,
    render_preview,
)
from prompt_factory.core.validation import (
    apply_feedback,
    ensure_valid,
    fold_answers,
    validate_form,
)
from prompt_factory.dependencies import get_adapter_registry, get_assembler

router = APIRouter()


@router.post(
    "/prompts/validate",
    response_model=ValidationResponse,
    summary="Check a form for missing required fields",
)
async def validate_prompt_form(form: FormData) -> ValidationResponse:
    issues = validate_form(form)
    return ValidationResponse(
        valid=not issues,
        issues=issues,
        cot_recommended=should_recommend_cot(form.task_type),
    )


@router.post(
    "/prompts",
    response_model=GenerateResponse,
    responses={422: {"model": ErrorResponse, "description": "Invalid form"}},
    summary="Generate provider-specific prompts",
    description=(
        "Assemble the generic PTCF prompt from the form and render it for "
        "every selected provider.  Unknown providers get a generic rendering."
    ),
)
async def generate_prompts(
    request: GenerateRequest,
    assembler: PromptAssembler = Depends(get_assembler),
    registry: AdapterRegistry = Depends(get_adapter_registry),
) -> GenerateResponse:
    form = request.form
    if request.feedback:
        form = apply_feedback(form, request.feedback)
    if request.questions:
        form = fold_answers(form, request.questions, request.answers)
    ensure_valid(form)

    generic = assembler.assemble(form)
    adapted_by_provider = assembler.adapt_all(generic, registry)

    prompts = []
    for provider_id, adapted in adapted_by_provider.items():
        raw = raw_prompt(adapted)
        prompts.append(ProviderPrompt(
            provider=registry.metadata_for(provider_id),
            adapted=adapted,
            preview=render_preview(adapted, registry.metadata_for(provider_id)),
            raw=raw,
            estimated_tokens=estimate_tokens(raw),
            filename=export_filename(provider_id),
        ))

    return GenerateResponse(
        generic=GenericPromptView(
            persona=generic.persona,
            task=generic.task,
            context=generic.context,
            format=generic.format,
        ),
        prompts=prompts,
    )
