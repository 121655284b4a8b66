from __future__ import annotations


class InvalidDimensionsError(ValueError):
    """Raised when a board is requested with non-positive sides or an odd cell count."""


class InvalidArgumentError(ValueError):
    """Raised when the engine is called with a structurally invalid board or tile reference."""
