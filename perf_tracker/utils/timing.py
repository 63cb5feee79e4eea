"""Timing utilities built on top of the registry."""

from __future__ import annotations

import contextlib
from typing import Iterator

from ..registry import InvalidOperationError, TimingRegistry
from ..report import DEFAULT_NAME
from ..resolution import Resolution
from .logging_utils import get_logger

LOGGER = get_logger("utils.timing")


@contextlib.contextmanager
def timed(
    registry: TimingRegistry,
    name: str = DEFAULT_NAME,
    resolution: Resolution | str | None = None,
) -> Iterator[int]:
    """Measure execution time of a code block as a section of *registry*.

    The section id is yielded so the caller can look it up afterwards. If the
    block raises, its exception wins over any failure to end the section.
    """

    section_id = registry.begin(name, resolution)
    try:
        yield section_id
    except BaseException:
        try:
            registry.end(section_id)
        except InvalidOperationError as exc:
            LOGGER.warning("Could not end section #%d after error: %s", section_id, exc)
        raise
    registry.end(section_id)
