from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from htmx_demo.store.locks import ReadWriteLock

logger = logging.getLogger(__name__)


class Filter(StrEnum):
    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    @classmethod
    def _missing_(cls, value: object) -> Filter | None:
        # Accept any casing (?mode=active, ?mode=COMPLETED).
        if isinstance(value, str):
            folded = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == folded:
                    return member
        return None

    def matches(self, todo: Todo) -> bool:
        if self is Filter.ACTIVE:
            return not todo.completed
        if self is Filter.COMPLETED:
            return todo.completed
        return True


@dataclass(frozen=True)
class Todo:
    id: int
    completed: bool
    text: str


class TodoNotFoundError(LookupError):
    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


@dataclass(frozen=True)
class TodoSnapshot:
    """Immutable read view of the store, taken for rendering."""

    items: tuple[Todo, ...]
    filter: Filter

    def visible(self) -> list[Todo]:
        """Items matching the active filter, newest first."""

        return [t for t in reversed(self.items) if self.filter.matches(t)]

    def item_at(self, position: int) -> Todo | None:
        if 0 <= position < len(self.items):
            return self.items[position]
        return None

    def count_active(self) -> int:
        return sum(1 for t in self.items if not t.completed)

    def all_completed(self) -> bool:
        # An empty list is never "all done".
        return bool(self.items) and all(t.completed for t in self.items)


class TodoStore:
    """Ordered in-memory todo list with a global filter.

    Mutations hold the write lock only for the mutation itself; callers render
    from a fresh snapshot afterwards.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._items: list[Todo] = []
        self._inc = 0
        self._filter = Filter.ALL

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._items)

    def _index_of(self, todo_id: int) -> int:
        for idx, item in enumerate(self._items):
            if item.id == todo_id:
                return idx
        logger.info("Todo %d not found", todo_id)
        raise TodoNotFoundError(todo_id)

    def create(self, text: str) -> Todo:
        with self._lock.write():
            self._inc += 1
            todo = Todo(id=self._inc, completed=False, text=text)
            self._items.append(todo)
        logger.debug("Created todo %d", todo.id)
        return todo

    def toggle(self, todo_id: int) -> int:
        """Flip completion of one todo and return its insertion-order index."""

        with self._lock.write():
            idx = self._index_of(todo_id)
            item = self._items[idx]
            self._items[idx] = replace(item, completed=not item.completed)
        logger.debug("Toggled todo %d", todo_id)
        return idx

    def delete(self, todo_id: int) -> None:
        with self._lock.write():
            idx = self._index_of(todo_id)
            del self._items[idx]
        logger.debug("Deleted todo %d", todo_id)

    def toggle_all(self) -> bool:
        """Complete everything, or clear everything once all are complete.

        Returns True when at least one item changed state.
        """

        with self._lock.write():
            target = not all(t.completed for t in self._items)
            dirty = False
            for idx, item in enumerate(self._items):
                if item.completed != target:
                    self._items[idx] = replace(item, completed=target)
                    dirty = True
        logger.debug("Toggled all todos to completed=%s (dirty=%s)", target, dirty)
        return dirty

    def set_filter(self, mode: Filter) -> None:
        with self._lock.write():
            self._filter = Filter(mode)

    def get_filter(self) -> Filter:
        with self._lock.read():
            return self._filter

    def count_active(self) -> int:
        return self.snapshot().count_active()

    def all_completed(self) -> bool:
        return self.snapshot().all_completed()

    def snapshot(self) -> TodoSnapshot:
        with self._lock.read():
            return TodoSnapshot(items=tuple(self._items), filter=self._filter)
