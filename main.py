# main.py

from uvicorn import run

from app.configs import settings
from app.main import app

__all__ = ["app"]


def main() -> None:
    run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
