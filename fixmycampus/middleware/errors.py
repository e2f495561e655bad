import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def unhandled_error_middleware(request: Request, call_next):
    """Answer any exception no handler claimed with a generic 500 body.

    Registered as the outermost middleware so the error ends here instead of
    being re-raised to the ASGI server.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal server error"}
        )
