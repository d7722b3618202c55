"""HID usage identifiers."""

from __future__ import annotations

from dataclasses import dataclass

_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class Usage:
    """A HID usage: a 16-bit usage page and a 16-bit usage value."""

    page: int
    value: int

    def __post_init__(self) -> None:
        for name in ("page", "value"):
            field = getattr(self, name)
            if not isinstance(field, int) or isinstance(field, bool):
                raise TypeError(f"usage {name} must be an int, got {type(field).__name__}")
            if not 0 <= field <= _U16_MAX:
                raise ValueError(f"usage {name} {field} does not fit in 16 bits")

    def packed(self) -> int:
        """Return page and value combined into one 32-bit integer."""
        return (self.page << 16) + self.value

    def __hash__(self) -> int:
        return hash(self.packed())