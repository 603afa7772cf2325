"""Terminal output for convex-skills commands."""

from .stdout import StdoutReporter

__all__ = ["StdoutReporter"]
