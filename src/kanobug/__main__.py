"""Run the service locally: ``python -m kanobug``."""

import uvicorn

from kanobug.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("kanobug.app:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
