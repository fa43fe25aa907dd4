"""Entry point for running the BCB Sounds backend."""

import uvicorn

from bcb_sounds_ms.shared.core.settings import get_settings


def main() -> None:
    """Run the FastAPI application."""
    settings = get_settings()
    uvicorn.run(
        "bcb_sounds_ms.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
