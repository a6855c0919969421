"""Device status snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from .animation import AnimationMode


@dataclass(frozen=True)
class DeviceStatus:
    """State reported by the controller in reply to a get-status command."""

    on: bool
    animation_mode: AnimationMode
    speed: int
    brightness: int
    color_order: str
    leds_per_segment: int
    number_of_segments: int
    color: str  # RRGGBB
    ic_type: str
    recorded_patterns: int
    white_brightness: int

    def to_dict(self) -> dict:
        return {
            "on": self.on,
            "animation_mode": {
                "code": self.animation_mode.code,
                "name": self.animation_mode.name,
            },
            "speed": self.speed,
            "brightness": self.brightness,
            "color_order": self.color_order,
            "leds_per_segment": self.leds_per_segment,
            "number_of_segments": self.number_of_segments,
            "color": self.color,
            "ic_type": self.ic_type,
            "recorded_patterns": self.recorded_patterns,
            "white_brightness": self.white_brightness,
        }
