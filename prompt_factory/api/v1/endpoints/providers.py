"""Provider listing endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from prompt_factory.api.v1.schemas.prompts import ProvidersResponse
from prompt_factory.core.adapters.registry import AdapterRegistry
from prompt_factory.core.models import ProviderCategory
from prompt_factory.dependencies import get_adapter_registry

router = APIRouter()


@router.get(
    "/providers",
    response_model=ProvidersResponse,
    summary="List target providers",
)
async def list_providers(
    category: ProviderCategory | None = Query(default=None, description="text, image or video"),
    registry: AdapterRegistry = Depends(get_adapter_registry),
) -> ProvidersResponse:
    if category is None:
        return ProvidersResponse(providers=registry.list_all())
    return ProvidersResponse(providers=registry.list_by_category(category))
