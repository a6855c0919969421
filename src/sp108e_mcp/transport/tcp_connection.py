"""TCP connection to the SP108E controller.

The controller handles one request per connection: every command opens a
fresh socket, writes a frame, optionally reads a fixed-length reply and
closes. Nothing is pooled or reused between calls.
"""

from __future__ import annotations

import logging
import socket

from ..protocol.framing import to_hex

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8189


class TCPConnection:
    """Request/response channel to a single controller.

    Usage::

        conn = TCPConnection("192.168.4.1")
        response = conn.send(frame_bytes, response_length=17)
    """

    def __init__(self, host: str, port: int = DEFAULT_PORT) -> None:
        self._host = host
        self._port = port

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    def send(self, frame: bytes, response_length: int = 0) -> str | None:
        """Send one frame and optionally read the reply.

        Args:
            frame: Encoded command frame.
            response_length: Number of reply bytes to read, or 0 to read
                nothing.

        Returns:
            The reply as an upper-case hex string, or None if no reply was
            requested or fewer than ``response_length`` bytes arrived.

        Raises:
            OSError: If the connection, write or read fails.
        """
        sock = socket.create_connection((self._host, self._port))
        try:
            logger.debug("-> %s:%d %s", self._host, self._port, to_hex(frame))
            sock.sendall(frame)

            if response_length <= 0:
                return None

            data = self._receive(sock, response_length)
            if len(data) != response_length:
                logger.debug(
                    "Short reply from %s:%d: expected %d bytes, got %d",
                    self._host, self._port, response_length, len(data),
                )
                return None

            response = to_hex(data)
            logger.debug("<- %s:%d %s", self._host, self._port, response)
            return response
        finally:
            self._close(sock)

    @staticmethod
    def _receive(sock: socket.socket, length: int) -> bytes:
        """Read until ``length`` bytes arrived or the peer closed."""
        data = b""
        while len(data) < length:
            chunk = sock.recv(length - len(data))
            if not chunk:
                break
            data += chunk
        return data

    def _close(self, sock: socket.socket) -> None:
        # Cleanup failures never mask the result of the round trip.
        try:
            sock.close()
        except OSError as e:
            logger.debug("Error closing connection to %s:%d: %s", self._host, self._port, e)
