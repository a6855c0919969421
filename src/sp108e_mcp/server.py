"""MCP server entry point for the SP108E LED controller.

Exposes tools, resources, and prompts via the Model Context Protocol
using the official Python MCP SDK with stdio transport.
"""

from __future__ import annotations

import json
import logging
import string
from typing import Any

from mcp.server.fastmcp import FastMCP

from .client import DeviceClient
from .models.animation import AnimationMode
from .protocol.commands import BRIGHTNESS_RANGE, DREAM_MODE_RANGE, SPEED_RANGE, clamp
from .transport.tcp_connection import DEFAULT_PORT

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "sp108e",
    instructions="MCP server for SP108E addressable LED strip controllers",
)

# Global client state
_client: DeviceClient | None = None


def _get_client() -> DeviceClient:
    """Get the configured client, raising if no controller was selected."""
    if _client is None:
        raise RuntimeError(
            "No controller configured. Use the 'connect' tool first."
        )
    return _client


def _parse_mode(mode: str) -> AnimationMode:
    """Accept either a mode name (``"wave"``) or a 2-digit hex code."""
    try:
        return AnimationMode.from_name(mode)
    except ValueError:
        return AnimationMode(mode)


def _normalize_color(color: str) -> str:
    value = color.strip().lstrip("#")
    if len(value) != 6 or any(c not in string.hexdigits for c in value):
        raise ValueError(f"Color must be 6 hex digits (RRGGBB), got {color!r}")
    return value.lower()


# ─── CONNECTION TOOLS ─────────────────────────────────────────────────

@mcp.tool()
def connect(host: str, port: int = DEFAULT_PORT) -> dict[str, Any]:
    """Select the SP108E controller to talk to.

    The controller takes one TCP connection per command, so this only
    records the address; nothing is sent until another tool is used.

    Args:
        host: Controller IP address or hostname.
        port: TCP port (default 8189).
    """
    global _client
    _client = DeviceClient(host, port)
    logger.info("Using controller %s:%d", host, port)
    return {"connected": True, "host": host, "port": port}


@mcp.tool()
def disconnect() -> dict[str, bool]:
    """Forget the selected controller."""
    global _client
    _client = None
    return {"disconnected": True}


# ─── POWER TOOLS ──────────────────────────────────────────────────────

@mcp.tool()
def power_on() -> dict[str, Any]:
    """Switch the LEDs on. Does nothing if they already are.

    Returns the status read before switching.
    """
    status = _get_client().on()
    if status is None:
        return {"error": "Device status unavailable"}
    return {"power": "on", "was_on": status.on, "status": status.to_dict()}


@mcp.tool()
def power_off() -> dict[str, Any]:
    """Switch the LEDs off. Does nothing if they already are.

    Returns the status read before switching.
    """
    status = _get_client().off()
    if status is None:
        return {"error": "Device status unavailable"}
    return {"power": "off", "was_on": status.on, "status": status.to_dict()}


@mcp.tool()
def toggle_power() -> dict[str, Any]:
    """Flip the power state regardless of the current state."""
    _get_client().toggle_on_off()
    return {"toggled": True}


# ─── LIGHTING TOOLS ───────────────────────────────────────────────────

@mcp.tool()
def set_brightness(brightness: int) -> dict[str, Any]:
    """Set the LED brightness.

    Args:
        brightness: 0-255. Out-of-range values are clamped.
    """
    _get_client().set_brightness(brightness)
    return {"brightness": clamp(brightness, *BRIGHTNESS_RANGE)}


@mcp.tool()
def set_speed(speed: int) -> dict[str, Any]:
    """Set the animation speed.

    Args:
        speed: 0-255. Out-of-range values are clamped.
    """
    _get_client().set_animation_speed(speed)
    return {"speed": clamp(speed, *SPEED_RANGE)}


@mcp.tool()
def set_animation_mode(mode: str) -> dict[str, Any]:
    """Select a built-in animation.

    Args:
        mode: Mode name (meteor, breathing, wave, catchup, static, stack,
              flash, flow) or a raw 2-digit hex code.
    """
    try:
        parsed = _parse_mode(mode)
    except ValueError as e:
        return {"error": str(e)}

    _get_client().set_animation_mode(parsed)
    return {"animation_mode": parsed.name or parsed.code}


@mcp.tool()
def set_color(color: str) -> dict[str, Any]:
    """Set a static color.

    Selects the static animation first if the controller has no mode.

    Args:
        color: ``RRGGBB`` or ``#RRGGBB``.
    """
    try:
        value = _normalize_color(color)
    except ValueError as e:
        return {"error": str(e)}

    _get_client().set_color(value)
    return {"color": value}


@mcp.tool()
def set_dream_mode(index: int) -> dict[str, Any]:
    """Play one of the controller's numbered dream mode patterns.

    Args:
        index: Pattern number 1-180. Out-of-range values are clamped.
    """
    _get_client().set_dream_mode(index)
    return {"dream_mode": clamp(index, *DREAM_MODE_RANGE)}


@mcp.tool()
def set_dream_mode_auto() -> dict[str, Any]:
    """Let the controller cycle through all dream mode patterns."""
    _get_client().set_dream_mode_auto()
    return {"dream_mode": "auto"}


# ─── MCP RESOURCES ───────────────────────────────────────────────────

@mcp.resource("sp108e://catalog/animation-modes")
def resource_animation_modes() -> str:
    """Named animation modes and their wire codes."""
    return json.dumps({
        "animation_modes": {
            name.lower(): mode.code
            for name, mode in AnimationMode.named().items()
            if mode != AnimationMode.NULL
        },
        "dream_modes": {"min": DREAM_MODE_RANGE[0], "max": DREAM_MODE_RANGE[1]},
    })


# ─── MCP PROMPTS ─────────────────────────────────────────────────────

@mcp.prompt()
def lighting_scene(mood: str) -> str:
    """Guide the AI to set up the LEDs for a mood or occasion.

    Args:
        mood: Mood, occasion, or color theme.
    """
    return f"""Set up the LED strip for: {mood}
Consider:
- A static color (set_color) or an animation (set_animation_mode)
- Brightness suited to the setting
- Animation speed if a moving effect is chosen
- One of the 180 dream mode patterns for something more elaborate

Read the sp108e://catalog/animation-modes resource for available modes.
Use power_on first if the strip may be off."""


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=logging.INFO)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
