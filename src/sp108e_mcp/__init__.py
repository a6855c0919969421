"""Client and MCP server for SP108E addressable LED controllers."""

from .client import DeviceClient
from .models import AnimationMode, DeviceStatus

__version__ = "0.1.0"
