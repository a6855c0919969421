"""Animation mode value type.

A mode is identified on the wire by a single byte, written as two hex
digits. Codes are normalized to upper case so that ``AnimationMode("cd")``
and ``AnimationMode("CD")`` compare and hash equal.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class AnimationMode:
    """A built-in lighting effect, or any other code the firmware reports."""

    code: str

    NULL: ClassVar[AnimationMode]
    METEOR: ClassVar[AnimationMode]
    BREATHING: ClassVar[AnimationMode]
    WAVE: ClassVar[AnimationMode]
    CATCHUP: ClassVar[AnimationMode]
    STATIC: ClassVar[AnimationMode]
    STACK: ClassVar[AnimationMode]
    FLASH: ClassVar[AnimationMode]
    FLOW: ClassVar[AnimationMode]

    def __post_init__(self) -> None:
        code = str(self.code).strip()
        if len(code) != 2 or any(c not in string.hexdigits for c in code):
            raise ValueError(f"Animation mode code must be 2 hex digits, got {self.code!r}")
        object.__setattr__(self, "code", code.upper())

    def __str__(self) -> str:
        return self.code

    @property
    def name(self) -> str | None:
        """Name of the built-in variant, or None for unnamed codes."""
        for name, mode in _NAMED.items():
            if mode == self:
                return name
        return None

    @classmethod
    def from_name(cls, name: str) -> AnimationMode:
        """Look up a named variant, ignoring case."""
        key = name.strip().upper()
        if key not in _NAMED:
            raise ValueError(f"Unknown animation mode '{name}'. Valid: {list(_NAMED)}")
        return _NAMED[key]

    @classmethod
    def named(cls) -> dict[str, AnimationMode]:
        return dict(_NAMED)


_NAMED: dict[str, AnimationMode] = {
    "NULL": AnimationMode("00"),
    "METEOR": AnimationMode("CD"),
    "BREATHING": AnimationMode("CE"),
    "WAVE": AnimationMode("D1"),
    "CATCHUP": AnimationMode("D4"),
    "STATIC": AnimationMode("D3"),
    "STACK": AnimationMode("CF"),
    "FLASH": AnimationMode("D2"),
    "FLOW": AnimationMode("D0"),
}

for _name, _mode in _NAMED.items():
    setattr(AnimationMode, _name, _mode)
