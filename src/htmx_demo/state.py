from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import HTTPException, Request

from htmx_demo.store import CounterStore, TodoStore


@dataclass(frozen=True)
class AppState:
    """Everything the handlers mutate, built once per application."""

    counter: CounterStore = field(default_factory=CounterStore)
    todos: TodoStore = field(default_factory=TodoStore)


def get_state(request: Request) -> AppState:
    state = getattr(request.app.state, "demo_state", None)
    if state is None:
        raise HTTPException(status_code=500, detail="App state not initialized")
    return state
