"""Protocol layer: command framing, command builders, and status parsing."""

from .framing import build_frame, parse_frame
from .commands import Command, build_command
from .parser import parse_status
