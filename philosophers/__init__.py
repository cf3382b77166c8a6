"""Dining philosophers simulation: threads as philosophers, locks as forks, and a monitor."""

__version__ = "1.0.0"
__all__ = ["__version__"]