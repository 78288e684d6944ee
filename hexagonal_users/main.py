"""
Process entry point.

Builds the application through the DI container and serves it on the fixed
address 0.0.0.0:8080 until the process is terminated. Exits with 1 when the
server cannot start (e.g. the port is taken) or dies with an error.
"""

import sys

import structlog
import uvicorn

from hexagonal_users.adapters.api.main import create_app
from hexagonal_users.shared.logging_config import configure_logging
from hexagonal_users.shared.telemetry import setup_telemetry

HOST = "0.0.0.0"
PORT = 8080

logger = structlog.get_logger()


def main() -> int:
    configure_logging()
    setup_telemetry()

    app = create_app()

    # log_config=None keeps the logging set up by configure_logging()
    server = uvicorn.Server(uvicorn.Config(app, host=HOST, port=PORT, log_config=None))

    logger.info(f"listening on http://{HOST}:{PORT}")
    try:
        server.run()
    except SystemExit as e:
        # uvicorn logs the bind error itself and exits during startup
        logger.error("server_failed", error="startup aborted", exit_code=e.code)
        return 1
    except Exception as e:
        logger.error("server_failed", error=str(e), exc_info=True)
        return 1

    if not server.started:
        logger.error("server_failed", error=f"could not start on {HOST}:{PORT}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
