# src/tasklist/api/task_handler.py

"""
HTTP handler for /tasks.

Translates requests into TaskService calls and results back into responses:
- POST -> create_task (201 + task JSON)
- GET  -> list_tasks (200 + JSON array)
- anything else -> 405

Client errors are answered as plain text, like the rest of the error surface.
"""

from __future__ import annotations

import json
import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ..core.ports import TaskStoreError
from ..tasks.task_service import TaskService, TaskValidationError

logger = logging.getLogger(__name__)

INVALID_JSON = "invalid JSON body"
METHOD_NOT_ALLOWED = "Method not allowed"
INTERNAL_ERROR = "internal server error"


class TaskHandler:
    def __init__(self, service: TaskService) -> None:
        self._service = service

    async def dispatch(self, request: Request) -> Response:
        if request.method == "POST":
            return await self.create_task(request)
        if request.method == "GET":
            return await self.list_tasks(request)
        logger.warning("Rejected %s %s", request.method, request.url.path)
        return PlainTextResponse(METHOD_NOT_ALLOWED, status_code=405)

    async def create_task(self, request: Request) -> Response:
        raw = await request.body()
        try:
            title = self._parse_title(raw)
        except (ValueError, RecursionError):
            logger.warning("Create rejected: malformed body (%d bytes)", len(raw))
            return PlainTextResponse(INVALID_JSON, status_code=400)

        try:
            task = self._service.create_task(title)
        except TaskValidationError as e:
            logger.warning("Create rejected: %s", e)
            return PlainTextResponse(str(e), status_code=400)
        except TaskStoreError:
            logger.exception("Create failed: store error")
            return PlainTextResponse(INTERNAL_ERROR, status_code=500)

        return JSONResponse(task.to_dict(), status_code=201)

    async def list_tasks(self, request: Request) -> Response:
        try:
            tasks = self._service.get_tasks()
        except TaskStoreError:
            logger.exception("List failed: store error")
            return PlainTextResponse(INTERNAL_ERROR, status_code=500)

        logger.debug("Listing %d tasks", len(tasks))
        return JSONResponse([t.to_dict() for t in tasks])

    @staticmethod
    def _parse_title(raw: bytes) -> str:
        """
        Extract "title" from a JSON body.

        - null behaves like {}
        - a missing title is "" (the service decides whether that's allowed)
        - anything that is not an object, or a non-string title, is malformed

        Raises ValueError (json.JSONDecodeError is one) on malformed input,
        or RecursionError when nesting is too deep for the decoder.
        """
        data = json.loads(raw)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("body must be a JSON object")
        title = data.get("title")
        if title is None:
            return ""
        if not isinstance(title, str):
            raise ValueError("title must be a string")
        return title
