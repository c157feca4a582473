"""Permissive cross-origin headers and preflight answers."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Add CORS headers to every response and answer OPTIONS with "ok".

    Browsers call the handlers directly from the client origin, so the
    headers are attached to error responses as well as successful ones.
    """

    def __init__(
        self,
        app: ASGIApp,
        allow_origin: str = "*",
        allow_headers: str = "authorization, x-client-info, apikey, content-type",
        allow_methods: str | None = "GET, POST, DELETE, OPTIONS",
    ):
        super().__init__(app)
        self.headers: dict[str, str] = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Headers": allow_headers,
        }
        if allow_methods:
            self.headers["Access-Control-Allow-Methods"] = allow_methods

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", headers=self.headers)

        response = await call_next(request)
        for header, value in self.headers.items():
            response.headers[header] = value
        return response
