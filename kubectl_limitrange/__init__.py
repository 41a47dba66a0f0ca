"""kubectl plugin that creates a single LimitRange from command-line flags."""

__version__ = "0.1.0"
