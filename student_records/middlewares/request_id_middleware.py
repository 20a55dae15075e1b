from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import Request, Response
from typing import Callable
import uuid

from student_records.utils.context import reset_request_id, set_request_id
from student_records.utils.logging import get_logger

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID, echoed back in the X-Request-ID header.

    A client-supplied ID is kept only if it parses as a UUID.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            request_id = str(uuid.UUID(request.headers.get(REQUEST_ID_HEADER)))
        except (ValueError, TypeError):
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        # Set in context variable for global access to logger
        token = set_request_id(request_id)
        try:
            logger.info(f"{request.method} {request.url.path}")
            response = await call_next(request)
            logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        finally:
            reset_request_id(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
