import uvicorn

from prompt_factory.config import settings


def main() -> None:
    uvicorn.run(
        "prompt_factory.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
