"""pace - time, distance and speed calculator CLI."""

__version__ = "0.1.0"
