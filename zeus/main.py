"""Main module entrypoint for local runtime execution.

This module validates startup configuration, binds the listener and serves
the FastAPI application with uvicorn.
"""

import logging

from zeus.bootstrap import (
    ListenerBindError,
    ServeError,
    bootstrap_bind_listener,
    bootstrap_create_application,
    bootstrap_create_server,
    bootstrap_serve,
)
from zeus.config import SettingsLoadError, config_load_settings
from zeus.logging_config import logging_configure

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the service and serve requests until the process ends.

    Logging is set up with defaults first so configuration errors are
    reported, then narrowed to the validated `log_level`. An interrupt while
    serving returns quietly once the server has shut down.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 on invalid configuration, bind
            failure or serve failure.
    """

    logging_configure()

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        main_report_fatal(error)
        raise SystemExit(1) from error

    logging.getLogger().setLevel(settings.log_level)
    application = bootstrap_create_application()

    try:
        listener = bootstrap_bind_listener(settings.bind_addr, settings.http_port)
    except ListenerBindError as error:
        main_report_fatal(error)
        raise SystemExit(1) from error

    server = bootstrap_create_server(application, settings)
    try:
        bootstrap_serve(server, listener)
    except KeyboardInterrupt:
        logger.info("Zeus Orchestrator stopped")
    except ServeError as error:
        main_report_fatal(error)
        raise SystemExit(1) from error


def main_report_fatal(error: Exception) -> None:
    """Log a fatal startup or runtime diagnostic.

    The process-wide logging handler writes to stderr.

    Args:
        error: Failure that terminates the process.
    """

    logger.error("%s", error)


if __name__ == "__main__":
    main()
