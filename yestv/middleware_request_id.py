import json
import logging
import time
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


logger = logging.getLogger("yestv.request")

REQUEST_ID_HEADER = "X-Request-ID"


def current_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id, echoed in the response header and error bodies."""

    async def dispatch(self, request: Request, call_next):
        req_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = req_id
        start = time.perf_counter()
        status_code = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = req_id
            return response
        finally:
            entry = {
                "request_id": req_id,
                "method": request.method,
                "path": request.url.path,
                "status": status_code,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            }
            if status_code >= 500:
                logger.warning(json.dumps(entry))
            else:
                logger.info(json.dumps(entry))
