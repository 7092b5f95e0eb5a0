class SfdrSineError(Exception):
    """Base error."""

class GridError(SfdrSineError, ValueError):
    """Raised when a search grid would produce a degenerate or empty search."""

class SearchError(SfdrSineError, RuntimeError):
    """Raised when a search finishes without any candidate (should be unreachable)."""
