"""Request authentication: required headers, body read, signature check."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from patreon_webhooks.errors.exceptions import BodyReadError, MissingHeadersError
from patreon_webhooks.signature import verify_signature

EVENT_HEADER = "X-Patreon-Event"
SIGNATURE_HEADER = "X-Patreon-Signature"


class BodyReader(Protocol):
    def read(self) -> bytes: ...


def _get_header(headers: Mapping[str, str], name: str) -> str:
    """Case-insensitive lookup that also works on plain dicts."""
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                value = candidate
                break
    return value or ""


def read_webhook_headers(
    headers: Mapping[str, str],
    event_header: str = EVENT_HEADER,
    signature_header: str = SIGNATURE_HEADER,
) -> tuple[str, str]:
    """Return ``(event, signature)`` from the request headers.

    Raises:
        MissingHeadersError: If either header is absent or empty.
    """
    event = _get_header(headers, event_header)
    signature = _get_header(headers, signature_header)

    missing = [
        name
        for name, value in ((event_header, event), (signature_header, signature))
        if not value
    ]
    if missing:
        raise MissingHeadersError(missing)
    return event, signature


def _read_body(body_reader: BodyReader | bytes | bytearray) -> bytes:
    if isinstance(body_reader, (bytes, bytearray)):
        return bytes(body_reader)
    try:
        body = body_reader.read()
    except (OSError, ValueError) as exc:
        raise BodyReadError(f"Request body could not be read: {exc}") from exc
    if not isinstance(body, (bytes, bytearray)):
        raise BodyReadError("Request body reader did not return bytes")
    return bytes(body)


def authenticate_body(
    headers: Mapping[str, str],
    body: bytes,
    secret: str,
    event_header: str = EVENT_HEADER,
    signature_header: str = SIGNATURE_HEADER,
) -> tuple[bytes, str]:
    """Authenticate a request whose body has already been read.

    Returns:
        ``(body, event)``, the body being the same object that was verified.

    Raises:
        MissingHeadersError: If the event or signature header is missing.
        SignatureMismatchError: If the signature does not match the body.
    """
    event, signature = read_webhook_headers(headers, event_header, signature_header)
    verify_signature(body, signature, secret)
    return body, event


def authenticate(
    headers: Mapping[str, str],
    body_reader: BodyReader | bytes | bytearray,
    secret: str,
    event_header: str = EVENT_HEADER,
    signature_header: str = SIGNATURE_HEADER,
) -> tuple[bytes, str]:
    """Authenticate a webhook request and return its raw body and event name.

    Headers are checked before the body is touched, so a request without
    them never consumes the stream. The returned bytes are exactly the bytes
    that were verified; decode those, never a re-serialized copy.

    Args:
        headers: Request headers (any mapping; lookup is case-insensitive).
        body_reader: File-like object with ``read()``, or the body bytes.
        secret: Webhook secret shared with Patreon.

    Returns:
        ``(raw_body, event_name)``.

    Raises:
        MissingHeadersError: If the event or signature header is missing.
        BodyReadError: If the body stream fails while being read.
        SignatureMismatchError: If the signature does not match the body.
    """
    event, signature = read_webhook_headers(headers, event_header, signature_header)
    body = _read_body(body_reader)
    verify_signature(body, signature, secret)
    return body, event
