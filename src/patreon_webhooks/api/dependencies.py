"""FastAPI dependency that authenticates and decodes a Patreon webhook request."""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from starlette.requests import ClientDisconnect

from patreon_webhooks.authenticator import authenticate_body, read_webhook_headers
from patreon_webhooks.config import settings
from patreon_webhooks.decoder import decode_webhook
from patreon_webhooks.errors.exceptions import BodyReadError, SignatureMismatchError
from patreon_webhooks.logging_config import bind_webhook_context, clear_webhook_context
from patreon_webhooks.models.webhook import VerifiedWebhook


async def get_verified_webhook(request: Request) -> AsyncIterator[VerifiedWebhook]:
    """Yield the verified, decoded webhook or raise a ``WebhookError``.

    The webhook logging context is bound for the rest of the request and
    cleared once the route has finished.

    Mount on the caller's own route::

        @router.post("/webhooks/patreon")
        async def receive(hook: VerifiedWebhookDep) -> dict:
            ...
    """
    read_webhook_headers(request.headers, settings.event_header, settings.signature_header)
    if not settings.webhook_secret:
        raise SignatureMismatchError("Webhook secret is not configured")

    try:
        body = await request.body()
    except ClientDisconnect as exc:
        raise BodyReadError("Client disconnected before the body was read") from exc

    raw_body, event = authenticate_body(
        request.headers,
        body,
        settings.webhook_secret,
        settings.event_header,
        settings.signature_header,
    )
    webhook = decode_webhook(raw_body)
    bind_webhook_context(event, webhook.data.id)
    try:
        yield VerifiedWebhook(event=event, webhook=webhook)
    finally:
        clear_webhook_context()


VerifiedWebhookDep = Annotated[VerifiedWebhook, Depends(get_verified_webhook)]
