from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prompt_factory import __version__
from prompt_factory.api.v1.middleware.error_handler import ErrorHandlerMiddleware
from prompt_factory.api.v1.middleware.logging_middleware import LoggingMiddleware
from prompt_factory.api.v1.router import v1_router
from prompt_factory.config import settings
from prompt_factory.core.adapters.registry import build_default_registry
from prompt_factory.utils.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(debug=settings.debug)
    logger = get_logger("startup")
    logger.info("Starting Prompt Factory", version=__version__)

    app.state.adapter_registry = build_default_registry()
    logger.info(
        "Adapter registry initialized",
        providers=[meta.id for meta in app.state.adapter_registry.list_all()],
    )

    yield

    logger.info("Shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Prompt Factory",
        description="Structured prompt generation for LLM, image and video providers",
        version=__version__,
        lifespan=lifespan,
    )

    # The last middleware added is the outermost.
    # 1. CORS (innermost -- answers preflight requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    # 2. Error handler (turns domain exceptions into JSON responses)
    app.add_middleware(ErrorHandlerMiddleware)
    # 3. Request/response logger (outermost -- binds the request id first)
    app.add_middleware(LoggingMiddleware)

    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
