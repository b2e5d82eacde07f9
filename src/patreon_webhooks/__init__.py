"""Patreon webhook verification and decoding."""

from patreon_webhooks.authenticator import authenticate, authenticate_body
from patreon_webhooks.decoder import decode_webhook, verify_and_decode
from patreon_webhooks.errors.exceptions import (
    BodyReadError,
    MalformedPayloadError,
    MissingHeadersError,
    SignatureMismatchError,
    UnknownEntityKindError,
    WebhookError,
)
from patreon_webhooks.models.webhook import VerifiedWebhook, Webhook
from patreon_webhooks.signature import compute_signature, verify_signature

__all__ = [
    "BodyReadError",
    "MalformedPayloadError",
    "MissingHeadersError",
    "SignatureMismatchError",
    "UnknownEntityKindError",
    "VerifiedWebhook",
    "Webhook",
    "WebhookError",
    "authenticate",
    "authenticate_body",
    "compute_signature",
    "decode_webhook",
    "verify_and_decode",
    "verify_signature",
]
