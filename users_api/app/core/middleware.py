"""
Request interceptors.

An interceptor is an async callable ``(request, call_next) -> response``.
It may run code before and after delegating to ``call_next``, or answer
the request itself without delegating (short‑circuit).

``InterceptorChain`` is a single Starlette middleware that runs an
ordered list of interceptors in front of the router: the first
interceptor in the list sees the request first and the response last.
"""

import logging
import time
from functools import partial
from typing import Awaitable, Callable, Iterable, List

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .errors import internal_error_response
from .timeutils import format_duration

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]
Interceptor = Callable[[Request, CallNext], Awaitable[Response]]


class LoggingInterceptor:
    """Log method and path on entry, and the elapsed time on exit."""

    def __init__(self, log: logging.Logger = logger) -> None:
        self.log = log

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        start = time.perf_counter()
        self.log.info("Started %s %s", request.method, request.url.path)
        try:
            return await call_next(request)
        finally:
            self.log.info(
                "Completed %s %s in %s",
                request.method,
                request.url.path,
                format_duration(time.perf_counter() - start),
            )


class CorsInterceptor:
    """Attach permissive CORS headers and answer preflight requests.

    ``OPTIONS`` requests get an empty 200 response straight away; the
    rest of the chain and the router never see them.
    """

    def __init__(
        self,
        allow_origin: str = "*",
        allow_methods: Iterable[str] = ("GET", "POST", "PUT", "DELETE", "OPTIONS"),
        allow_headers: Iterable[str] = ("Content-Type",),
    ) -> None:
        self.headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ", ".join(allow_methods),
            "Access-Control-Allow-Headers": ", ".join(allow_headers),
        }

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self.headers)
        response = await call_next(request)
        response.headers.update(self.headers)
        return response


class ErrorInterceptor:
    """Turn an unexpected exception into the 500 error envelope.

    Placed after ``CorsInterceptor`` so the error response gets the
    same headers as every other response.
    """

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        try:
            return await call_next(request)
        except Exception:
            return internal_error_response(request)


class InterceptorChain(BaseHTTPMiddleware):
    """Run ``interceptors`` in order, then hand over to the application."""

    def __init__(self, app: ASGIApp, interceptors: Iterable[Interceptor]) -> None:
        super().__init__(app)
        self.interceptors: List[Interceptor] = list(interceptors)

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        return await self._run(0, call_next, request)

    async def _run(self, index: int, call_next: CallNext, request: Request) -> Response:
        if index == len(self.interceptors):
            return await call_next(request)
        return await self.interceptors[index](request, partial(self._run, index + 1, call_next))
