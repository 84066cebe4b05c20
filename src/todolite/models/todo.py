"""Todo data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# Initial value of the legacy ``status`` field. Toggling never updates it;
# ``completed`` is the field every filter reads.
INITIAL_STATUS = "pending"


class TodoRecord(BaseModel):
    """One todo entry as held in memory and persisted to the key-value store.

    The persisted JSON keeps the camel-case ``dueDate`` key so stored lists
    stay compatible with the browser widget's ``localStorage`` layout.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    task: str
    due_date: str = Field(alias="dueDate")
    completed: bool = False
    status: str = INITIAL_STATUS


TodoList = TypeAdapter(list[TodoRecord])


def dump_todos(todos: list[TodoRecord]) -> str:
    """Serialize a whole todo list to the persisted JSON string."""
    return TodoList.dump_json(todos, by_alias=True).decode("utf-8")


def load_todos(raw: str) -> list[TodoRecord]:
    """Parse a persisted JSON string.

    Raises:
        pydantic.ValidationError: If the text is not a valid todo list
    """
    return TodoList.validate_json(raw)
