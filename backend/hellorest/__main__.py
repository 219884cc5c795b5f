"""Run the service with uvicorn: ``python -m hellorest``."""

import uvicorn

from hellorest.config import settings


def main() -> None:
    uvicorn.run(
        "hellorest.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
