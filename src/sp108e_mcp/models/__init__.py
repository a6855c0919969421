"""Data models for animation modes and device status."""

from .animation import AnimationMode
from .status import DeviceStatus
