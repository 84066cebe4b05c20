"""todolite domain models.

Pydantic models for todo records and application configuration.
"""

from .config_models import AppConfig, StorageConfig, UIConfig
from .todo import INITIAL_STATUS, TodoRecord, dump_todos, load_todos

__all__ = [
    "TodoRecord",
    "INITIAL_STATUS",
    "dump_todos",
    "load_todos",
    "AppConfig",
    "StorageConfig",
    "UIConfig",
]
