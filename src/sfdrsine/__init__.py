"""sfdrsine public API.

Find the 16-sample, 14-bit quantized sine table with the lowest SFDR-style error.
"""

from .api import (
    evaluate,
    search_min_sine,
    format_result,
)
from .core.errors import GridError, SearchError, SfdrSineError
from .core.types import DEFAULT_GRID, Candidate, SearchGrid
from .engines.metric import sfdr
from .engines.waveform import generate

__all__ = [
    "evaluate",
    "search_min_sine",
    "format_result",
    "sfdr",
    "generate",
    "Candidate",
    "SearchGrid",
    "DEFAULT_GRID",
    "SfdrSineError",
    "GridError",
    "SearchError",
]
