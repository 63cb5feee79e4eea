"""Text rendering for timing reports."""

from __future__ import annotations

import locale
from typing import Callable, Iterable, Optional, Tuple

from .resolution import Resolution
from .utils.logging_utils import get_logger

LOGGER = get_logger("report")

NumberFormatter = Callable[[int], str]
Row = Tuple[str, Optional[int], Resolution]

DEFAULT_NAME = "UNKNOWN"
DEFAULT_TITLE = "Performance List"
STILL_RUNNING = "STILL RUNNING"
NO_EVENTS = "No Events Tracked"


def fixed_grouping(separator: str = ",") -> NumberFormatter:
    """Return a formatter grouping digits in threes with *separator*."""

    def _format(value: int) -> str:
        return f"{value:,}".replace(",", separator)

    return _format


def locale_grouping(locale_name: str | None = "") -> NumberFormatter:
    """Return a formatter that follows the ``LC_NUMERIC`` grouping.

    ``locale_name`` is applied to ``LC_NUMERIC`` first; the default ``""``
    selects the host environment's locale. Pass ``None`` to keep whatever
    numeric locale the process already uses.
    """

    if locale_name is not None:
        try:
            locale.setlocale(locale.LC_NUMERIC, locale_name)
        except locale.Error as exc:
            LOGGER.warning("Cannot switch LC_NUMERIC to %r: %s", locale_name, exc)

    def _format(value: int) -> str:
        return locale.format_string("%d", value, grouping=True)

    return _format


def _centered(title: str, width: int) -> str:
    # Title ends just past the midpoint of the rule.
    return title.rjust(width // 2 + len(title) // 2)


def _row(name: str, runtime: str, width: int) -> str:
    padding = max(width - len(name), len(runtime) + 1)
    return f"{name}{runtime.rjust(padding)}"


def render_table(
    rows: Iterable[Row],
    *,
    title: str = DEFAULT_TITLE,
    width: int = 75,
    formatter: NumberFormatter | None = None,
) -> str:
    """Build the framed report text for *rows* of ``(name, elapsed, resolution)``."""

    fmt = formatter or fixed_grouping()
    rule = "-" * width
    lines = ["", rule, _centered(title, width), rule, ""]

    body = []
    for name, elapsed, resolution in rows:
        if elapsed is None:
            runtime = STILL_RUNNING
        else:
            runtime = f"{fmt(elapsed)} {resolution.suffix}"
        body.append(_row(name, runtime, width))

    if body:
        lines.extend(body)
    else:
        lines.append(f"\t{NO_EVENTS}")

    lines.extend(["", rule, ""])
    return "\n".join(lines) + "\n"
