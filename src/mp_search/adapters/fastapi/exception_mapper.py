"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

from mp_search.config.validation import ConfigError
from mp_search.kernel.errors import BaseError, HandlerNotFoundError


class FastAPIExceptionMapper:
    """Register mp_search error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "handler_not_found", "message": "...", "detail": {}}

    Mappings
    --------
    ``HandlerNotFoundError`` → 404
    ``ConfigError``          → 500
    ``BaseError``            → 500
    """

    def __init__(self) -> None:
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[BaseError], int]] = [
            (HandlerNotFoundError, 404),
            (ConfigError, 500),
            (BaseError, 500),
        ]

    def status_for(self, exc: BaseError) -> int:
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return 500

    def register(self, app: Any) -> None:
        """Register the error handler on a ``FastAPI`` or ``Starlette`` app."""

        async def handler(request: Any, exc: BaseError) -> JSONResponse:  # noqa: ARG001
            return JSONResponse(status_code=self.status_for(exc), content=exc.to_dict())

        app.add_exception_handler(BaseError, handler)


__all__ = ["FastAPIExceptionMapper"]
