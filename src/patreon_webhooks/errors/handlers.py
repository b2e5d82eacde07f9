"""FastAPI exception handlers turning webhook errors into JSON responses."""

import logging
import uuid
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from patreon_webhooks.errors.exceptions import WebhookError
from patreon_webhooks.models.error_response import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the webhook error handler on the FastAPI app."""

    @app.exception_handler(WebhookError)
    async def webhook_error_handler(request: Request, exc: WebhookError):
        trace_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        # Never log the body or the signature header.
        logger.warning(
            "webhook_rejected",
            extra={
                "path": request.url.path,
                "trace_id": trace_id,
                "code": exc.code,
                "reason": exc.message,
            },
        )
        error_response = ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
                trace_id=trace_id,
                timestamp=datetime.now(timezone.utc),
            ),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(mode="json", exclude_none=True),
        )
