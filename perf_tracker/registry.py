"""Registry of named, timed code sections."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, List, Optional, TextIO, Tuple

from .config import settings
from .report import (
    DEFAULT_NAME,
    DEFAULT_TITLE,
    NumberFormatter,
    fixed_grouping,
    locale_grouping,
    render_table,
)
from .resolution import Resolution
from .utils.logging_utils import get_logger

LOGGER = get_logger("registry")


class InvalidOperationError(RuntimeError):
    """Raised when a section cannot be ended."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid Performance Operation: {detail}")
        self.detail = detail


@dataclass
class Section:
    """One named interval. ``elapsed`` stays ``None`` while it is running."""

    name: str
    resolution: Resolution
    start_ns: int
    elapsed: Optional[int] = None

    @property
    def running(self) -> bool:
        return self.elapsed is None


class TimingRegistry:
    """Ordered collection of timed sections addressed by their position."""

    def __init__(
        self,
        *,
        clock: Callable[[], int] = time.perf_counter_ns,
        formatter: NumberFormatter | None = None,
        width: int | None = None,
        allow_repeat_end: bool | None = None,
    ) -> None:
        self._clock = clock
        if formatter is None:
            formatter = locale_grouping() if settings.use_locale else fixed_grouping()
        self._formatter = formatter
        self._width = settings.table_width if width is None else width
        self._allow_repeat_end = (
            settings.allow_repeat_end if allow_repeat_end is None else allow_repeat_end
        )
        self._sections: List[Section] = []
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sections)

    def begin(
        self,
        name: str = DEFAULT_NAME,
        resolution: Resolution | str | None = None,
    ) -> int:
        """Start a new section and return its id."""

        unit = settings.default_resolution if resolution is None else Resolution.parse(resolution)
        with self._lock:
            section_id = len(self._sections)
            self._sections.append(Section(name=str(name), resolution=unit, start_ns=self._clock()))
        LOGGER.debug("Began section #%d %r (%s)", section_id, name, unit.suffix)
        return section_id

    def end(self, section_id: int) -> int:
        """Stop section *section_id* and return its elapsed time in its own unit."""

        now = self._clock()
        with self._lock:
            section = self._lookup(section_id)
            if section.elapsed is not None and not self._allow_repeat_end:
                LOGGER.warning("Section #%d %r was already ended", section_id, section.name)
                raise InvalidOperationError(f"section {section_id} was already ended")
            elapsed = section.resolution.from_nanoseconds(now - section.start_ns)
            if elapsed < 0:
                LOGGER.warning("Clock went backwards while ending section #%d", section_id)
                raise InvalidOperationError(f"negative elapsed time for section {section_id}")
            section.elapsed = elapsed
        LOGGER.debug(
            "Ended section #%d %r after %d %s",
            section_id,
            section.name,
            elapsed,
            section.resolution.suffix,
        )
        return elapsed

    def get(self, section_id: int) -> Section:
        """Return a copy of section *section_id*."""

        with self._lock:
            section = self._lookup(section_id)
            return Section(section.name, section.resolution, section.start_ns, section.elapsed)

    def sections(self) -> Tuple[Section, ...]:
        """Snapshot of all sections in insertion order."""

        with self._lock:
            return tuple(
                Section(s.name, s.resolution, s.start_ns, s.elapsed) for s in self._sections
            )

    def render(self, title: str = DEFAULT_TITLE) -> str:
        """Return the report for all sections as text."""

        with self._lock:
            rows = [(s.name, s.elapsed, s.resolution) for s in self._sections]
        return render_table(rows, title=title, width=self._width, formatter=self._formatter)

    def show(self, title: str = DEFAULT_TITLE, stream: Optional[TextIO] = None) -> str:
        """Write the report to *stream* (stdout by default) and return it."""

        text = self.render(title)
        target = sys.stdout if stream is None else stream
        target.write(text)
        target.flush()
        return text

    def reset(self) -> None:
        """Drop every section; ids restart from zero."""

        with self._lock:
            count = len(self._sections)
            self._sections.clear()
        LOGGER.info("Reset registry (%d sections dropped)", count)

    def _lookup(self, section_id: int) -> Section:
        if isinstance(section_id, bool) or not isinstance(section_id, int):
            LOGGER.warning("Rejected non-integer section id %r", section_id)
            raise InvalidOperationError(f"section id {section_id!r} is not an integer")
        if not 0 <= section_id < len(self._sections):
            LOGGER.warning(
                "Section id %d out of range (%d sections)", section_id, len(self._sections)
            )
            raise InvalidOperationError(f"section id {section_id} is out of range")
        return self._sections[section_id]
