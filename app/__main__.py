"""Run the web client with uvicorn: ``python -m app``."""

import uvicorn

from app.core.config import settings


def main() -> None:
    # log_config=None keeps uvicorn from replacing the loguru interception
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
