"""Storage abstraction layer for todolite.

The todo list and the theme switcher both persist through a small key-value
string store, modelled on the browser's ``localStorage``. Concrete adapters
live in ``todolite.adapters``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StorageError(Exception):
    """Raised when the key-value store cannot be written."""


class KeyValueStore(ABC):
    """Abstract base class for a persistent string-to-string store."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored under *key*, or None if absent."""
        raise NotImplementedError("KeyValueStore.get_item() must be implemented by adapter")

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value.

        Raises:
            StorageError: If the value could not be persisted
        """
        raise NotImplementedError("KeyValueStore.set_item() must be implemented by adapter")

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete *key*; absent keys are ignored."""
        raise NotImplementedError(
            "KeyValueStore.remove_item() must be implemented by adapter"
        )

    @abstractmethod
    def clear(self) -> None:
        """Delete every key."""
        raise NotImplementedError("KeyValueStore.clear() must be implemented by adapter")
