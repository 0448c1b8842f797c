from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from htmx_demo.config import AssetsConfig
from htmx_demo.htmx import htmx_request
from htmx_demo.state import AppState, get_state
from htmx_demo.store import Filter

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["filters"] = list(Filter)

router = APIRouter(tags=["ui"])


def _get_assets(request: Request) -> AssetsConfig:
    config = getattr(request.app.state, "demo_config", None)
    assets = getattr(config, "assets", None)
    return assets if isinstance(assets, AssetsConfig) else AssetsConfig()


def _render_page(
    request: Request,
    name: str,
    ctx: dict[str, Any],
    *,
    hx: bool,
    status_code: int = 200,
) -> HTMLResponse:
    """Render a tab either as a full document or as a boosted-navigation body."""

    base = {
        "layout": "nav.html" if hx else "page.html",
        "assets": _get_assets(request),
    }
    return templates.TemplateResponse(request, name, base | ctx, status_code=status_code)


def _render_fragment(request: Request, name: str, ctx: dict[str, Any]) -> HTMLResponse:
    return templates.TemplateResponse(request, f"fragments/{name}", ctx)


def render_about(request: Request, state: AppState, *, hx: bool) -> HTMLResponse:
    return _render_page(
        request, "about.html", {"title": "About", "count": state.counter.get()}, hx=hx
    )


def render_todos(request: Request, state: AppState, *, hx: bool) -> HTMLResponse:
    return _render_page(
        request, "todos.html", {"title": "Todos", "snapshot": state.todos.snapshot()}, hx=hx
    )


def render_error(
    request: Request, *, message: str, status_code: int, active: str | None = None
) -> HTMLResponse:
    return _render_page(
        request,
        "error.html",
        {"title": "Error", "message": message, "active": active},
        hx=False,
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def about(
    request: Request,
    state: AppState = Depends(get_state),  # noqa: B008
    hx: bool = Depends(htmx_request),  # noqa: B008
) -> HTMLResponse:
    return render_about(request, state, hx=hx)


@router.post("/", response_class=HTMLResponse)
async def about_increment(
    request: Request,
    state: AppState = Depends(get_state),  # noqa: B008
    hx: bool = Depends(htmx_request),  # noqa: B008
) -> HTMLResponse:
    count = state.counter.increment()
    if not hx:
        return render_about(request, state, hx=False)
    return _render_fragment(request, "about_count.html", {"count": count})


@router.get("/todos", response_class=HTMLResponse)
async def todos(
    request: Request,
    state: AppState = Depends(get_state),  # noqa: B008
    hx: bool = Depends(htmx_request),  # noqa: B008
) -> HTMLResponse:
    return render_todos(request, state, hx=hx)


@router.post("/todos", response_class=HTMLResponse)
async def todos_create(
    request: Request,
    text: str = Form(default=""),
    state: AppState = Depends(get_state),  # noqa: B008
    hx: bool = Depends(htmx_request),  # noqa: B008
) -> HTMLResponse:
    todo = state.todos.create(text)
    if not hx:
        return render_todos(request, state, hx=False)

    snapshot = state.todos.snapshot()
    # The new row is prepended to #items-list; skip it when the filter hides it.
    created = todo if snapshot.filter.matches(todo) else None
    return _render_fragment(
        request, "todo_created.html", {"snapshot": snapshot, "created": created}
    )


@router.get("/todos/filter", response_class=HTMLResponse)
async def todos_filter(
    request: Request,
    mode: Filter = Query(...),
    state: AppState = Depends(get_state),  # noqa: B008
    hx: bool = Depends(htmx_request),  # noqa: B008
) -> HTMLResponse:
    state.todos.set_filter(mode)
    if not hx:
        return render_todos(request, state, hx=False)
    return _render_fragment(
        request, "todos_filtered.html", {"snapshot": state.todos.snapshot()}
    )


@router.post("/todos/toggleall", response_class=HTMLResponse)
async def todos_toggle_all(
    request: Request,
    state: AppState = Depends(get_state),  # noqa: B008
    hx: bool = Depends(htmx_request),  # noqa: B008
) -> HTMLResponse:
    dirty = state.todos.toggle_all()
    if not hx:
        return render_todos(request, state, hx=False)
    return _render_fragment(
        request,
        "todos_toggled_all.html",
        {"snapshot": state.todos.snapshot(), "dirty": dirty},
    )


@router.post("/todos/todo/{todo_id}/toggle", response_class=HTMLResponse)
async def todos_toggle(
    request: Request,
    todo_id: int,
    state: AppState = Depends(get_state),  # noqa: B008
    hx: bool = Depends(htmx_request),  # noqa: B008
) -> HTMLResponse:
    position = state.todos.toggle(todo_id)
    if not hx:
        return render_todos(request, state, hx=False)

    snapshot = state.todos.snapshot()
    toggled = None
    if snapshot.filter is Filter.ALL:
        item = snapshot.item_at(position)
        # A concurrent delete may have shifted the row; then the row is left out.
        if item is not None and item.id == todo_id:
            toggled = item
    # Under Active/Completed the toggled row no longer matches, so an empty
    # primary body removes it from the list.
    return _render_fragment(
        request, "todo_toggled.html", {"snapshot": snapshot, "toggled": toggled}
    )


@router.delete("/todos/todo/{todo_id}", response_class=HTMLResponse)
async def todos_delete(
    request: Request,
    todo_id: int,
    state: AppState = Depends(get_state),  # noqa: B008
    hx: bool = Depends(htmx_request),  # noqa: B008
) -> HTMLResponse:
    state.todos.delete(todo_id)
    if not hx:
        return render_todos(request, state, hx=False)
    return _render_fragment(
        request, "todo_deleted.html", {"snapshot": state.todos.snapshot()}
    )
