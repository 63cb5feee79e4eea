"""Time resolutions a section can be reported in."""

from __future__ import annotations

from enum import Enum


class Resolution(Enum):
    """Unit a section's elapsed time is truncated to."""

    SECONDS = ("s", 1_000_000_000)
    MILLISECONDS = ("ms", 1_000_000)
    MICROSECONDS = ("µs", 1_000)
    NANOSECONDS = ("ns", 1)

    def __init__(self, suffix: str, nanos_per_unit: int) -> None:
        self.suffix = suffix
        self.nanos_per_unit = nanos_per_unit

    def from_nanoseconds(self, nanoseconds: int) -> int:
        """Convert *nanoseconds* to this unit, truncating toward zero."""

        units = abs(nanoseconds) // self.nanos_per_unit
        return units if nanoseconds >= 0 else -units

    @classmethod
    def parse(cls, value: "Resolution | str") -> "Resolution":
        """Accept a member, its name (``"milliseconds"``) or its suffix (``"ms"``)."""

        if isinstance(value, cls):
            return value
        normalized = str(value).strip()
        for member in cls:
            if normalized.lower() == member.name.lower() or normalized == member.suffix:
                return member
        if normalized.lower() in {"us", "usec", "micro"}:
            return cls.MICROSECONDS
        raise ValueError(f"Unknown resolution: {value!r}")
