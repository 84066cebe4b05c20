"""todolite - a terminal todo list with local key-value persistence."""

__version__ = "0.1.0"
