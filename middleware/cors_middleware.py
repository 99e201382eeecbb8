from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from config.settings import CORS_HEADERS


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """
    Answers preflight requests and stamps CORS headers on every response.

    Starlette's CORSMiddleware is not a drop-in here: it omits
    Access-Control-Allow-Headers on simple responses and its preflight
    answer carries a body.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Preflight never reaches the routers
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
