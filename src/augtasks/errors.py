"""
Exceptions raised by task construction and batch generation.
"""


class ConfigurationError(ValueError):
    """Invalid task parameters or batch size. Raised before any generation work."""


class InternalInvariantError(RuntimeError):
    """A generated batch broke an internal invariant (generation-logic defect)."""
