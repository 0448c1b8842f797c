from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles

from htmx_demo.config import load_demo_config
from htmx_demo.home import ensure_demo_layout, resolve_demo_home
from htmx_demo.htmx import is_boosted, is_htmx_request
from htmx_demo.state import AppState
from htmx_demo.store import TodoNotFoundError
from htmx_demo.ui.router import STATIC_DIR as UI_STATIC_DIR
from htmx_demo.ui.router import render_error
from htmx_demo.ui.router import router as ui_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        home = resolve_demo_home()
        paths = ensure_demo_layout(home)
        config = load_demo_config(paths)

        # Configure Logging
        root = logging.getLogger()
        root.setLevel(logging.INFO)
        # Avoid adding duplicate handlers if reloaded
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            file_handler = RotatingFileHandler(
                paths.log_path,
                maxBytes=config.logging.max_size_mb * 1024 * 1024,
                backupCount=config.logging.backup_count,
                encoding="utf-8",
            )
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        logger.info("htmx demo starting up")
        logger.info(f"Logs directory: {paths.logs_dir}")

        app.state.demo_home = home
        app.state.demo_paths = paths
        app.state.demo_config = config
        app.state.demo_state = AppState()

        yield

        logger.info("htmx demo shutting down")

    app = FastAPI(title="htmx demo", version="0.1.0", lifespan=_lifespan)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        kind = "boosted" if is_boosted(request) else "htmx" if is_htmx_request(request) else "page"
        logger.info(f"{request.method} {request.url.path} ({kind}) - {response.status_code}")
        return response

    def _error_response(request: Request, status_code: int, message: str) -> Response:
        # htmx does not swap 4xx/5xx bodies; a bare status is enough.
        if is_htmx_request(request):
            return Response(status_code=status_code)
        return render_error(request, message=message, status_code=status_code)

    @app.exception_handler(TodoNotFoundError)
    async def _todo_not_found_handler(request: Request, exc: TodoNotFoundError) -> Response:
        if is_htmx_request(request):
            return Response(status_code=400)
        return render_error(
            request, message="Invalid item number", status_code=400, active="todos"
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> Response:
        return _error_response(request, 422, "Request validation failed")

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException) -> Response:
        return _error_response(request, exc.status_code, str(exc.detail))

    @app.exception_handler(StarletteHTTPException)
    async def _starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
        return _error_response(request, exc.status_code, message)

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> HTMLResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        # Avoid leaking internals.
        return HTMLResponse("<p>Internal server error</p>", status_code=500)

    if UI_STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(UI_STATIC_DIR)), name="static")
    else:
        logger.warning(
            "UI static directory is missing (%s); /static will not be served",
            UI_STATIC_DIR,
        )
    app.include_router(ui_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app
