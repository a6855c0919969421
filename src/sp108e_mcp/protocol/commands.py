"""Command opcodes and high-level command builders.

Each command is identified by a single-byte opcode placed between the
3-byte parameter and the frame suffix.
"""

from __future__ import annotations

from enum import IntEnum

from ..models.animation import AnimationMode
from .framing import NO_PARAMETER, build_frame


class Command(IntEnum):
    """Command opcodes."""

    GET_NAME = 0x77
    GET_STATUS = 0x10
    TOGGLE = 0xAA
    SET_ANIMATION_MODE = 0x2C
    SET_BRIGHTNESS = 0x2A
    SET_SPEED = 0x03
    SET_COLOR = 0x22
    # Dream mode indexes share the animation-mode opcode on the wire.
    SET_DREAM_MODE = 0x2C
    SET_DREAM_MODE_AUTO = 0x06


BRIGHTNESS_RANGE = (0, 255)
SPEED_RANGE = (0, 255)
DREAM_MODE_RANGE = (1, 180)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def int_to_hex(value: int) -> str:
    """Format a value as lower-case hex, left-padded to 2 digits."""
    return format(value, "x").rjust(2, "0")


def build_command(command: Command, parameter: str = NO_PARAMETER) -> bytes:
    """Build the 6-byte frame for a command."""
    return build_frame(command.value, parameter)


def build_get_status() -> bytes:
    return build_command(Command.GET_STATUS)


def build_toggle() -> bytes:
    return build_command(Command.TOGGLE)


def build_set_brightness(brightness: int) -> bytes:
    """Build a set-brightness command; values outside 0-255 are clamped."""
    return build_command(Command.SET_BRIGHTNESS, int_to_hex(clamp(brightness, *BRIGHTNESS_RANGE)))


def build_set_speed(speed: int) -> bytes:
    """Build a set-speed command; values outside 0-255 are clamped."""
    return build_command(Command.SET_SPEED, int_to_hex(clamp(speed, *SPEED_RANGE)))


def build_set_animation_mode(mode: AnimationMode) -> bytes:
    return build_command(Command.SET_ANIMATION_MODE, mode.code)


def build_set_color(hex_color: str) -> bytes:
    """Build a set-color command.

    Args:
        hex_color: ``RRGGBB`` hex digits, passed through unchanged.
    """
    return build_command(Command.SET_COLOR, hex_color)


def build_set_dream_mode(mode: int) -> bytes:
    """Build a dream-mode command.

    Args:
        mode: Pattern number 1-180, clamped. The device counts from zero,
            so ``mode - 1`` goes on the wire.
    """
    return build_command(Command.SET_DREAM_MODE, int_to_hex(clamp(mode, *DREAM_MODE_RANGE) - 1))


def build_set_dream_mode_auto() -> bytes:
    return build_command(Command.SET_DREAM_MODE_AUTO)
