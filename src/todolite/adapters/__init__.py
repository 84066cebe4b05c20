"""Storage adapters implementing ``KeyValueStore``."""

from .local_storage import FileLocalStorage, MemoryLocalStorage

__all__ = ["FileLocalStorage", "MemoryLocalStorage"]
