from fastapi import APIRouter

from prompt_factory.api.v1.endpoints import extract, health, prompts, providers, questions, refine

v1_router = APIRouter()
v1_router.include_router(health.router, tags=["health"])
v1_router.include_router(providers.router, tags=["providers"])
v1_router.include_router(prompts.router, tags=["prompts"])
v1_router.include_router(extract.router, tags=["extract"])
v1_router.include_router(questions.router, tags=["questions"])
v1_router.include_router(refine.router, tags=["refine"])
