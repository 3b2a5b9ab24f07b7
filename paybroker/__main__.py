import uvicorn

from paybroker.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "paybroker.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    main()
