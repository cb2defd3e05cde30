"""Per-request correlation id and access log.

A caller-supplied ``X-Request-ID`` is reused when it looks sane, otherwise a
fresh ``req_<hex>`` id is minted. The id lands on ``request.state`` for the
response envelope and is echoed back in the response header.

Server errors are logged at WARNING so they stand out from normal traffic:
    INFO    POST /api/v1/trades/buy 200 3ms req_a1b2c3d4e5f6
    WARNING GET /api/v1/portfolio 500 1ms req_0f9e8d7c6b5a
"""

import logging
import re
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("st.request")

REQUEST_ID_HEADER = "X-Request-ID"
_INBOUND_ID = re.compile(r"^[A-Za-z0-9_.-]{1,64}$")


def resolve_request_id(inbound: str | None) -> str:
    if inbound and _INBOUND_ID.match(inbound):
        return inbound
    return f"req_{uuid.uuid4().hex[:12]}"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        took_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s %d %.0fms %s",
            request.method,
            request.url.path,
            response.status_code,
            took_ms,
            request_id,
        )
        return response
