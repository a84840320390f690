"""FastAPI ASGI application entrypoint."""

from .core.app_factory import create_application
from .core.config import Settings

settings = Settings()
app = create_application(settings)

__all__ = ("app",)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
