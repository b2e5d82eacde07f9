"""HMAC-MD5 signing of webhook bodies.

Patreon signs each body with HMAC-MD5 keyed by the webhook secret and sends
the lowercase hex digest in ``X-Patreon-Signature``. The digest algorithm is
fixed by the sender; changing it here breaks verification.
"""

import hashlib
import hmac

from patreon_webhooks.errors.exceptions import SignatureMismatchError


def compute_signature(body: bytes, secret: str) -> str:
    """Compute the lowercase hex HMAC-MD5 of the raw body."""
    return hmac.new(secret.encode("utf-8"), body, hashlib.md5).hexdigest()


def verify_signature(body: bytes, signature: str, secret: str) -> None:
    """Check a declared signature against the body.

    Args:
        body: Raw request body, exactly as received.
        signature: Value of the signature header.
        secret: Webhook secret shared with Patreon.

    Raises:
        SignatureMismatchError: If the signature differs in any byte.
    """
    expected = compute_signature(body, secret).encode("ascii")
    if not hmac.compare_digest(expected, signature.encode("utf-8", "surrogatepass")):
        raise SignatureMismatchError()
