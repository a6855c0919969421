"""Command frame builder and parser for the SP108E TCP protocol.

Frame layout::

    +--------+-----------+---------+--------+
    | Prefix | Parameter | Command | Suffix |
    | 1 byte |  3 bytes  | 1 byte  | 1 byte |
    +--------+-----------+---------+--------+

- Prefix: 0x38
- Parameter: hex string, right-padded with zeros to 3 bytes
- Command: single-byte opcode
- Suffix: 0x83
"""

from __future__ import annotations

from dataclasses import dataclass

PREFIX = 0x38
SUFFIX = 0x83
FRAME_SIZE = 6
PARAMETER_HEX_LENGTH = 6  # 3 bytes
NO_PARAMETER = "000000"


@dataclass(frozen=True)
class Frame:
    """A parsed command frame."""

    command: int
    parameter: str

    def __repr__(self) -> str:
        return f"Frame(command=0x{self.command:02X}, parameter={self.parameter})"


def to_hex(data: bytes) -> str:
    """Render raw bytes as an upper-case hex string without separators."""
    return data.hex().upper()


def frame_hex(command: int, parameter: str = NO_PARAMETER) -> str:
    """Return the hex spelling of a frame.

    The parameter is padded on the right but never truncated; oversized
    parameters produce an oversized frame.
    """
    return (
        f"{PREFIX:02X}"
        f"{parameter.ljust(PARAMETER_HEX_LENGTH, '0')}"
        f"{command:02X}"
        f"{SUFFIX:02X}"
    ).upper()


def build_frame(command: int, parameter: str = NO_PARAMETER) -> bytes:
    """Build the raw bytes for a single command.

    Args:
        command: Single-byte opcode.
        parameter: Hex-encoded parameter, at most 3 bytes for every known
            command.

    Raises:
        ValueError: If the parameter is not valid hex.
    """
    return bytes.fromhex(frame_hex(command, parameter))


def parse_frame(data: bytes) -> Frame | None:
    """Parse a 6-byte command frame.

    Returns:
        A ``Frame``, or ``None`` if the length, prefix or suffix is wrong.
    """
    if len(data) != FRAME_SIZE:
        return None
    if data[0] != PREFIX or data[-1] != SUFFIX:
        return None
    return Frame(command=data[4], parameter=to_hex(data[1:4]))
