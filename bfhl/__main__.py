"""
Process entry point: python -m bfhl

Binds HOST:PORT from the environment (default 0.0.0.0:3000).
"""
import uvicorn

from bfhl.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bfhl.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
