"""Run the API server with uvicorn."""

import uvicorn

from src.utils.config import get_application_settings


def main() -> None:
    """Start the server on the configured host and port."""
    settings = get_application_settings()
    uvicorn.run("src.api.app:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
