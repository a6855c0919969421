"""Response parsing for device status messages.

The status reply is handled as an upper-case hex string. Offsets below are
in hex characters (two per byte)::

    +------+-------+------+-------+------------+-------+----------+----------+-------+----+----------+-------+
    | Hdr  | Power | Mode | Speed | Brightness | Order | LEDs/seg | Segments | Color | IC | Patterns | White |
    | 0    | 2     | 4    | 6     | 8          | 10    | 12 (4)   | 16 (4)   | 20 (6)| 26 | 28       | 30    |
    +------+-------+------+-------+------------+-------+----------+----------+-------+----+----------+-------+
"""

from __future__ import annotations

import logging
import string

from ..models.animation import AnimationMode
from ..models.status import DeviceStatus

logger = logging.getLogger(__name__)

STATUS_RESPONSE_LENGTH = 17  # bytes read from the socket
MIN_STATUS_HEX_LENGTH = 32

POWER_ON = "01"


def _hex_int(response: str, start: int, length: int) -> int:
    return int(response[start : start + length], 16)


def parse_status(response: str | None) -> DeviceStatus | None:
    """Decode a status reply.

    Args:
        response: Hex string as returned by the transport.

    Returns:
        A ``DeviceStatus``, or ``None`` if the response is missing, shorter
        than 32 hex characters, or not hex.
    """
    if not response or len(response) < MIN_STATUS_HEX_LENGTH:
        return None
    if any(c not in string.hexdigits for c in response[:MIN_STATUS_HEX_LENGTH]):
        logger.debug("Malformed status response %r", response)
        return None

    return DeviceStatus(
        on=response[2:4] == POWER_ON,
        animation_mode=AnimationMode(response[4:6]),
        speed=_hex_int(response, 6, 2),
        brightness=_hex_int(response, 8, 2),
        color_order=response[10:12],
        leds_per_segment=_hex_int(response, 12, 4),
        number_of_segments=_hex_int(response, 16, 4),
        color=response[20:26],
        ic_type=response[26:28],
        recorded_patterns=_hex_int(response, 28, 2),
        white_brightness=_hex_int(response, 30, 2),
    )
