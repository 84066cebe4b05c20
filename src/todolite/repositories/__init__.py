"""Storage interfaces."""

from .repository import KeyValueStore, StorageError

__all__ = ["KeyValueStore", "StorageError"]
