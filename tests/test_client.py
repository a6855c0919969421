"""Tests for DeviceClient operations, with the TCP connection mocked."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from sp108e_mcp.client import DeviceClient
from sp108e_mcp.models.animation import AnimationMode
from sp108e_mcp.protocol.commands import Command
from sp108e_mcp.protocol.framing import parse_frame

STATUS_ON = "3801D380FF02012C0001FF880003054083"
STATUS_OFF = "3800D380FF02012C0001FF880003054083"
STATUS_NULL_MODE = "380100" "80FF02012C0001FF880003054083"


def _client_with_replies(*replies: str | None) -> tuple[DeviceClient, MagicMock]:
    """Build a client whose connection returns the given replies in order."""
    client = DeviceClient("10.0.0.5")
    conn = MagicMock()
    conn.host = "10.0.0.5"
    conn.send.side_effect = list(replies)
    client._connection = conn
    return client, conn


def _sent(conn: MagicMock) -> list[tuple[int, str, int]]:
    """Decode every frame sent as (command, parameter, response_length)."""
    sent = []
    for call in conn.send.call_args_list:
        frame = parse_frame(call.args[0])
        response_length = call.args[1] if len(call.args) > 1 else 0
        sent.append((frame.command, frame.parameter, response_length))
    return sent


def test_host_and_port():
    client = DeviceClient("10.0.0.5", 9000)
    assert client.host == "10.0.0.5"
    assert client.port == 9000
    assert DeviceClient("10.0.0.5").port == 8189


def test_toggle_on_off():
    client, conn = _client_with_replies(STATUS_ON)
    client.toggle_on_off()
    assert _sent(conn) == [(Command.TOGGLE, "000000", 17)]


def test_off_when_on_toggles():
    client, conn = _client_with_replies(STATUS_ON, STATUS_OFF)
    client.off()
    assert _sent(conn) == [
        (Command.GET_STATUS, "000000", 17),
        (Command.TOGGLE, "000000", 17),
    ]


def test_off_when_already_off_does_nothing():
    client, conn = _client_with_replies(STATUS_OFF)
    status = client.off()
    assert status is not None
    assert status.on is False
    assert _sent(conn) == [(Command.GET_STATUS, "000000", 17)]


def test_on_when_off_toggles():
    client, conn = _client_with_replies(STATUS_OFF, STATUS_ON)
    status = client.on()
    assert status.on is False
    assert [c[0] for c in _sent(conn)] == [Command.GET_STATUS, Command.TOGGLE]


def test_on_when_already_on_does_nothing():
    client, conn = _client_with_replies(STATUS_ON)
    client.on()
    assert [c[0] for c in _sent(conn)] == [Command.GET_STATUS]


@pytest.mark.parametrize("operation", ["on", "off"])
def test_power_with_unreadable_status_does_nothing(operation):
    client, conn = _client_with_replies(None)
    assert getattr(client, operation)() is None
    assert [c[0] for c in _sent(conn)] == [Command.GET_STATUS]


def test_power_with_short_status_does_nothing():
    client, conn = _client_with_replies(STATUS_ON[:20])
    client.on()
    assert conn.send.call_count == 1


def test_set_brightness_clamps():
    client, conn = _client_with_replies(None, None)
    client.set_brightness(300)
    client.set_brightness(-1)
    assert _sent(conn) == [
        (Command.SET_BRIGHTNESS, "FF0000", 0),
        (Command.SET_BRIGHTNESS, "000000", 0),
    ]


def test_set_animation_speed():
    client, conn = _client_with_replies(None)
    client.set_animation_speed(16)
    assert _sent(conn) == [(Command.SET_SPEED, "100000", 0)]


def test_set_animation_mode():
    client, conn = _client_with_replies(None)
    client.set_animation_mode(AnimationMode.WAVE)
    assert _sent(conn) == [(Command.SET_ANIMATION_MODE, "D10000", 0)]


def test_set_color_with_null_mode_selects_static_first():
    client, conn = _client_with_replies(STATUS_NULL_MODE, None, None)
    client.set_color("ff8800")
    assert _sent(conn) == [
        (Command.GET_STATUS, "000000", 17),
        (Command.SET_ANIMATION_MODE, "D30000", 0),
        (Command.SET_COLOR, "FF8800", 0),
    ]


def test_set_color_with_active_mode_sends_color_only():
    client, conn = _client_with_replies(STATUS_ON, None)
    client.set_color("00ff00")
    assert _sent(conn) == [
        (Command.GET_STATUS, "000000", 17),
        (Command.SET_COLOR, "00FF00", 0),
    ]


def test_set_color_with_unreadable_status_sends_color_only():
    client, conn = _client_with_replies(None, None)
    client.set_color("0000ff")
    assert [c[0] for c in _sent(conn)] == [Command.GET_STATUS, Command.SET_COLOR]


def test_set_dream_mode_is_zero_indexed():
    client, conn = _client_with_replies(None, None, None)
    client.set_dream_mode(1)
    client.set_dream_mode(180)
    client.set_dream_mode(500)
    assert [c[1] for c in _sent(conn)] == ["000000", "B30000", "B30000"]
    assert all(c[0] == Command.SET_DREAM_MODE for c in _sent(conn))


def test_set_dream_mode_auto():
    client, conn = _client_with_replies(None)
    client.set_dream_mode_auto()
    assert _sent(conn) == [(Command.SET_DREAM_MODE_AUTO, "000000", 0)]


def test_network_error_propagates():
    client, conn = _client_with_replies()
    conn.send.side_effect = ConnectionRefusedError
    with pytest.raises(ConnectionRefusedError):
        client.on()
