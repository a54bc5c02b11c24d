"""Unit tests for server socket binding and uvicorn wiring."""

import socket
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI

from led_exporter.bootstrap.server import bind_socket, serve


def _ipv6_loopback_available() -> bool:
    if not socket.has_ipv6:
        return False
    try:
        with socket.socket(socket.AF_INET6, socket.SOCK_STREAM) as sock:
            sock.bind(("::1", 0))
    except OSError:
        return False
    return True


requires_ipv6 = pytest.mark.skipif(
    not _ipv6_loopback_available(), reason="IPv6 loopback unavailable"
)


class TestBindSocket:
    """Tests for bind_socket."""

    def test_binds_ephemeral_port(self) -> None:
        """Binding port 0 yields a bound socket."""
        sock = bind_socket("127.0.0.1", 0)
        try:
            host, port = sock.getsockname()
            assert host == "127.0.0.1"
            assert port > 0
            assert sock.get_inheritable()
        finally:
            sock.close()

    def test_busy_port_raises(self) -> None:
        """Binding a port that is already listening raises OSError."""
        busy = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        busy.bind(("127.0.0.1", 0))
        busy.listen()
        try:
            with pytest.raises(OSError):
                bind_socket("127.0.0.1", busy.getsockname()[1])
        finally:
            busy.close()

    def test_hostname_resolves(self) -> None:
        """Hostnames are resolved before binding."""
        sock = bind_socket("localhost", 0)
        try:
            assert sock.family in (socket.AF_INET, socket.AF_INET6)
            assert sock.getsockname()[1] > 0
        finally:
            sock.close()

    @requires_ipv6
    @pytest.mark.parametrize("host", ["::1", "[::1]"])
    def test_ipv6_literal_binds(self, host: str) -> None:
        """IPv6 literals bind with or without brackets."""
        sock = bind_socket(host, 0)
        try:
            assert sock.family == socket.AF_INET6
            assert sock.getsockname()[0] == "::1"
        finally:
            sock.close()

    def test_unresolvable_host_raises(self) -> None:
        """Resolution failures surface as OSError."""
        with patch(
            "led_exporter.bootstrap.server.socket.getaddrinfo",
            side_effect=socket.gaierror("Name or service not known"),
        ):
            with pytest.raises(OSError):
                bind_socket("no-such-host.invalid", 0)


class TestServe:
    """Tests for serve."""

    def test_runs_uvicorn_on_socket(self) -> None:
        """uvicorn is started on the provided socket."""
        app = FastAPI()
        sock = MagicMock(spec=socket.socket)

        with patch("led_exporter.bootstrap.server.uvicorn.Server") as server_cls:
            serve(app, sock)

        server_cls.return_value.run.assert_called_once_with(sockets=[sock])
        config = server_cls.call_args.args[0]
        assert config.app is app
