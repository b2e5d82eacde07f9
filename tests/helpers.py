"""Body and header builders shared by the test modules."""

import json
from pathlib import Path

from patreon_webhooks.signature import compute_signature

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

SECRET = "whsec-test-0123456789"


def load_fixture(name: str) -> bytes:
    """Return a fixture's raw bytes, unmodified."""
    return (FIXTURES_DIR / name).read_bytes()


def make_body(data: dict | None = None, included: list | None = None, **extra) -> bytes:
    """Build a compact JSON:API webhook body."""
    document = {
        "data": data or {"id": "1", "type": "member", "attributes": {}},
        **extra,
    }
    if included is not None:
        document["included"] = included
    return json.dumps(document, separators=(",", ":")).encode("utf-8")


def signed_headers(body: bytes, secret: str = SECRET, event: str = "members:pledge:create") -> dict:
    return {
        "X-Patreon-Event": event,
        "X-Patreon-Signature": compute_signature(body, secret),
    }
