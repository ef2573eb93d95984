# src/tasklist/api/app.py

from __future__ import annotations

from fastapi import APIRouter, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .task_handler import METHOD_NOT_ALLOWED, TaskHandler

TASKS_PATH = "/tasks"

# Common methods go through the handler; any other verb is answered by
# _plain_405 with the same body.
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE"]


async def _plain_405(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 405:
        return PlainTextResponse(METHOD_NOT_ALLOWED, status_code=405)
    return await http_exception_handler(request, exc)


def build_router(handler: TaskHandler) -> APIRouter:
    router = APIRouter()
    router.add_api_route(
        TASKS_PATH,
        handler.dispatch,
        methods=ROUTED_METHODS,
        include_in_schema=False,
    )
    return router


def create_app(handler: TaskHandler, *, title: str = "tasklist") -> FastAPI:
    """Build the ASGI app around an explicit router (no module-level app)."""
    app = FastAPI(title=title, docs_url=None, redoc_url=None, openapi_url=None)
    app.add_exception_handler(StarletteHTTPException, _plain_405)
    app.include_router(build_router(handler))
    return app
