"""Application bootstrap wiring for listener binding and server assembly."""

import logging
import socket

import uvicorn
from fastapi import FastAPI

from zeus.api import create_api_application
from zeus.config import ServiceSettings

logger = logging.getLogger(__name__)


class ListenerBindError(RuntimeError):
    """Raised when the TCP listener cannot be bound to the configured address."""


class ServeError(RuntimeError):
    """Raised when the server fails to start or stops on a transport failure."""


def bootstrap_create_application() -> FastAPI:
    """Assemble the runtime application.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.
    """

    return create_api_application()


def bootstrap_bind_listener(bind_addr: str, port: int) -> socket.socket:
    """Bind a TCP socket on `bind_addr:port` ready to be served.

    IPv6 literals get an IPv6 socket, everything else IPv4. The socket is
    bound but not yet listening; the server starts listening on it.

    Args:
        bind_addr: IP address to bind.
        port: TCP port, `0` requests an OS-assigned port.

    Returns:
        socket.socket: Bound socket owned by the caller.

    Raises:
        ListenerBindError: Raised when the address is invalid, the port is in
            use or binding is not permitted.
    """

    family = socket.AF_INET6 if ":" in bind_addr else socket.AF_INET
    listener = socket.socket(family, socket.SOCK_STREAM)
    try:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((bind_addr, port))
    except (OSError, OverflowError) as error:
        listener.close()
        raise ListenerBindError(f"Failed to bind {bootstrap_format_address(bind_addr, port)}: {error}") from error

    listener.set_inheritable(True)
    return listener


def bootstrap_format_address(host: str, port: int) -> str:
    """Render a host and port pair, bracketing IPv6 hosts.

    Args:
        host: IP address.
        port: TCP port.

    Returns:
        str: `host:port` or `[host]:port`.
    """

    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def bootstrap_create_server(application: FastAPI, settings: ServiceSettings) -> uvicorn.Server:
    """Build the uvicorn server for the application.

    uvicorn's loggers propagate into the process-wide logging setup.

    Args:
        application: ASGI application to serve.
        settings: Validated service settings.

    Returns:
        uvicorn.Server: Server ready to run on a pre-bound socket.
    """

    config = uvicorn.Config(
        application,
        host=settings.bind_addr,
        port=settings.http_port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    return uvicorn.Server(config)


def bootstrap_serve(server: uvicorn.Server, listener: socket.socket) -> None:
    """Serve requests on the bound listener until the server exits.

    Args:
        server: uvicorn server built by `bootstrap_create_server`.
        listener: Socket returned by `bootstrap_bind_listener`.

    Raises:
        ServeError: Raised when serving fails or never started.
    """

    host, port = listener.getsockname()[:2]
    logger.info("Zeus Orchestrator listening on %s", bootstrap_format_address(host, port))

    try:
        server.run(sockets=[listener])
    except OSError as error:
        raise ServeError(f"Server failed: {error}") from error
    finally:
        listener.close()

    if not server.started:
        raise ServeError("Server failed to start")
