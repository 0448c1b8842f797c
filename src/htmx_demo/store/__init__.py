from __future__ import annotations

from htmx_demo.store.counter import CounterStore
from htmx_demo.store.todos import Filter, Todo, TodoNotFoundError, TodoSnapshot, TodoStore

__all__ = [
    "CounterStore",
    "Filter",
    "Todo",
    "TodoNotFoundError",
    "TodoSnapshot",
    "TodoStore",
]
