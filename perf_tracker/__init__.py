"""Named section timing with a plain-text summary report."""

from .registry import InvalidOperationError, Section, TimingRegistry
from .report import DEFAULT_NAME, fixed_grouping, locale_grouping, render_table
from .resolution import Resolution
from .utils.timing import timed

__all__ = [
    "DEFAULT_NAME",
    "InvalidOperationError",
    "Resolution",
    "Section",
    "TimingRegistry",
    "fixed_grouping",
    "locale_grouping",
    "render_table",
    "timed",
]

__version__ = "0.1.0"
