"""Exception handlers that turn failures into HTML error pages."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.domain.exceptions import StorageError

logger = logging.getLogger(__name__)

NOT_FOUND_PAGE = "<h1>Requested page not found :(</h1><p>If you have questions, please contact us.</p>"
SERVER_ERROR_PAGE = "500 internal server error!"


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
    return HTMLResponse(NOT_FOUND_PAGE, status_code=404)


async def storage_error_handler(request: Request, exc: StorageError) -> HTMLResponse:
    logger.error(
        "Storage failure while handling %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return HTMLResponse(SERVER_ERROR_PAGE, status_code=500)


async def unhandled_exception_handler(request: Request, exc: Exception) -> HTMLResponse:
    logger.error(
        "Unhandled error while handling %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return HTMLResponse(SERVER_ERROR_PAGE, status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(404, not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
