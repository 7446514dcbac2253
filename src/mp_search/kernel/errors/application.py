"""Kernel errors – failures raised while wiring or dispatching searches."""

from __future__ import annotations

from typing import Any

from mp_search.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    default_code = "application_error"


class HandlerNotFoundError(ApplicationError, KeyError):
    """The query bus has no handler for the dispatched request type.

    Also a ``KeyError`` so mapping-style lookups can catch it.
    """

    default_code = "handler_not_found"

    def __init__(self, request_type: type, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"request_type": request_type.__qualname__})
        super().__init__(f"No handler registered for {request_type.__name__!r}", **kwargs)
        self.request_type = request_type


__all__ = ["ApplicationError", "HandlerNotFoundError"]
