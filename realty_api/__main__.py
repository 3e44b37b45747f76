"""Run the API with uvicorn: ``python -m realty_api``."""

import uvicorn

from realty_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("realty_api.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
