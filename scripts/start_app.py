#!/usr/bin/env python3
"""Start the comment service, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from commentary.config import Settings
from commentary.util.logging import setup_logging
from commentary.util.observability import configure_logfire


def main() -> int:
    """Run the API under uvicorn."""
    settings = Settings()

    setup_logging(settings)
    # Configured before the app module is imported so startup errors are traced
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting comment service",
            environment=settings.environment,
            port=settings.port,
        )

        uvicorn.run(
            "commentary.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
