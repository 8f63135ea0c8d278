"""Generation error taxonomy.

``ConfigurationError`` is fatal and raised before any generation work starts.
``DegenerateInputWarning`` is advisory: the run completes with a valid (if
uninteresting) grid.
"""


class ConfigurationError(ValueError):
    """Invalid generator parameters (dimensions, fill percent, markers...)."""


class DegenerateInputWarning(UserWarning):
    """Generation completed but produced a degenerate layout (e.g. zero regions)."""


__all__ = ["ConfigurationError", "DegenerateInputWarning"]
