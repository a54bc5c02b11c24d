"""HTTP server wiring for the exporter.

The listening socket is bound before uvicorn starts so that a busy or
forbidden port is reported through structlog and turned into a non-zero
exit status by the caller.
"""

from __future__ import annotations

import socket

import uvicorn
from fastapi import FastAPI


def bind_socket(host: str, port: int) -> socket.socket:
    """Create a TCP socket bound to host:port.

    Args:
        host: Address to bind: IPv4 or IPv6 literal (brackets allowed),
            or hostname.
        port: TCP port.

    Returns:
        The bound, not yet listening, socket.

    Raises:
        OSError: If the address cannot be resolved or bound.
    """
    family, _, _, _, sockaddr = socket.getaddrinfo(
        host.strip("[]"), port, type=socket.SOCK_STREAM
    )[0]
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(sockaddr)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def serve(app: FastAPI, sock: socket.socket) -> None:
    """Run uvicorn on an already-bound socket until shutdown.

    Args:
        app: The ASGI application.
        sock: Socket returned by bind_socket().
    """
    config = uvicorn.Config(app, log_config=None, access_log=False)
    server = uvicorn.Server(config)
    server.run(sockets=[sock])
