"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from exercise_tracker.config import Settings


def main() -> None:
    """Run the ASGI app on the configured host and port."""
    settings = Settings()
    uvicorn.run(
        "exercise_tracker.api.asgi:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
