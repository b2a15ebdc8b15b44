"""

admock/core/errors.py

"""


import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from admock.core.database import StorageError
from admock.models.base import ErrorKind

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error answered with a ``{success: false, type: ...}`` body"""

    def __init__(
        self,
        status_code: int,
        kind: ErrorKind,
        error: Optional[str] = None,
        **extra: Any,
    ):
        super().__init__(error or kind.value)
        self.status_code = status_code
        self.kind = kind
        self.error = error
        self.extra = extra

    def to_content(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"success": False, "type": self.kind.value}
        if self.error is not None:
            content["error"] = self.error
        content.update(self.extra)
        return content


class ValidationFailed(ApiError):
    def __init__(self, errors):
        super().__init__(status.HTTP_400_BAD_REQUEST, ErrorKind.VALIDATION, errors=list(errors))


class NotFound(ApiError):
    def __init__(self, error: str):
        super().__init__(status.HTTP_404_NOT_FOUND, ErrorKind.NOT_FOUND, error)


async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "type": ErrorKind.STORAGE.value, "error": "Storage error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
