from fastapi import APIRouter

from prompt_factory import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": "prompt-factory", "version": __version__}
