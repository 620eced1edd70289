"""Process-wide logging configuration."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_logging_configured = False


def logging_configure(level: str = "INFO") -> bool:
    """Configure root logging once per process.

    Later calls leave the existing configuration untouched.

    Args:
        level: Standard logging level name.

    Returns:
        bool: True when this call applied the configuration, False otherwise.
    """

    global _logging_configured
    if _logging_configured:
        return False

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    _logging_configured = True
    return True
