"""CORS middleware."""

from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.cors import cors_headers


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Answer preflight probes and stamp CORS headers on every response.

    Unlike Starlette's CORSMiddleware, headers are added whether or not the
    request carries an Origin header, and OPTIONS is answered for any path.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """
        Short-circuit OPTIONS and decorate all other responses.

        Args:
            request: Request object
            call_next: Next middleware in chain

        Returns:
            Response object
        """
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers())

        response = await call_next(request)
        response.headers.update(cors_headers())
        return response
