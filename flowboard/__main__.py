"""Run the API with uvicorn: ``python -m flowboard``."""

import uvicorn

from flowboard.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("flowboard.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
