import uvicorn

from skill_gateway.config import settings


def main() -> None:
    uvicorn.run(
        "skill_gateway.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
