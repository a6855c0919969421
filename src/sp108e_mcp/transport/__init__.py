"""Transport layer: per-command TCP connections."""

from .tcp_connection import DEFAULT_PORT, TCPConnection
