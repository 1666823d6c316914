"""Run the API with uvicorn: python -m schoolfinder."""

import uvicorn

from schoolfinder.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "schoolfinder.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    main()
