"""High-level client for the SP108E LED controller."""

from __future__ import annotations

import logging

from .models.animation import AnimationMode
from .models.status import DeviceStatus
from .protocol.commands import (
    build_get_status,
    build_set_animation_mode,
    build_set_brightness,
    build_set_color,
    build_set_dream_mode,
    build_set_dream_mode_auto,
    build_set_speed,
    build_toggle,
)
from .protocol.parser import STATUS_RESPONSE_LENGTH, parse_status
from .transport.tcp_connection import DEFAULT_PORT, TCPConnection

logger = logging.getLogger(__name__)


class DeviceClient:
    """Sends lighting commands to one controller.

    Every operation performs its own connect/send/close cycle. ``on``,
    ``off`` and ``set_color`` read the status first and therefore make two
    round trips; nothing guards the device state between them.

    Usage::

        client = DeviceClient("192.168.4.1")
        client.on()
        client.set_color("ff8800")
        client.set_brightness(128)
    """

    def __init__(self, host: str, port: int = DEFAULT_PORT) -> None:
        self._connection = TCPConnection(host, port)

    @property
    def host(self) -> str:
        return self._connection.host

    @property
    def port(self) -> int:
        return self._connection.port

    def toggle_on_off(self) -> None:
        """Flip the power state."""
        # The controller answers a toggle with a status-sized reply; it is
        # read and discarded.
        self._connection.send(build_toggle(), STATUS_RESPONSE_LENGTH)

    def off(self) -> DeviceStatus | None:
        """Switch off, unless the device already reports being off.

        Returns:
            The status read before acting, or None if it could not be
            read, in which case nothing is sent.
        """
        status = self._get_status()
        if status is None:
            logger.warning("Status of %s unavailable, not switching off", self.host)
            return None
        if status.on:
            self.toggle_on_off()
        return status

    def on(self) -> DeviceStatus | None:
        """Switch on, unless the device already reports being on.

        Returns:
            The status read before acting, or None if it could not be
            read, in which case nothing is sent.
        """
        status = self._get_status()
        if status is None:
            logger.warning("Status of %s unavailable, not switching on", self.host)
            return None
        if not status.on:
            self.toggle_on_off()
        return status

    def set_brightness(self, brightness: int) -> None:
        """Set brightness 0-255; out-of-range values are clamped."""
        self._connection.send(build_set_brightness(brightness))

    def set_animation_speed(self, speed: int) -> None:
        """Set animation speed 0-255; out-of-range values are clamped."""
        self._connection.send(build_set_speed(speed))

    def set_animation_mode(self, mode: AnimationMode) -> None:
        self._connection.send(build_set_animation_mode(mode))

    def set_color(self, hex_color: str) -> None:
        """Set a static ``RRGGBB`` color.

        The controller ignores colors while no animation mode is active, so
        the static mode is selected first when the status reports none.
        """
        status = self._get_status()
        if status is None:
            logger.warning("Status of %s unavailable, sending color without mode check", self.host)
        elif status.animation_mode == AnimationMode.NULL:
            self.set_animation_mode(AnimationMode.STATIC)

        self._connection.send(build_set_color(hex_color))

    def set_dream_mode(self, mode: int) -> None:
        """Select dream mode pattern 1-180; out-of-range values are clamped."""
        self._connection.send(build_set_dream_mode(mode))

    def set_dream_mode_auto(self) -> None:
        """Let the controller cycle through dream mode patterns."""
        self._connection.send(build_set_dream_mode_auto())

    def _get_status(self) -> DeviceStatus | None:
        response = self._connection.send(build_get_status(), STATUS_RESPONSE_LENGTH)
        status = parse_status(response)
        if status is not None:
            logger.debug("Status of %s: %s", self.host, status)
        return status

    def __repr__(self) -> str:
        return f"DeviceClient(host={self.host!r}, port={self.port})"
