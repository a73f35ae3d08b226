import uvicorn

from slotmachine.logging import configure_logging
from slotmachine.settings import settings


def main():
    """Run the FastAPI application with uvicorn server."""
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run("slotmachine.app:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)


if __name__ == "__main__":
    main()
