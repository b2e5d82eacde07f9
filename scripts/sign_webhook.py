"""Sign a webhook body the way Patreon does and optionally deliver it.

Usage:
    python scripts/sign_webhook.py tests/fixtures/members_pledge_create.json --secret s3cret
    python scripts/sign_webhook.py body.json --secret s3cret \
        --event members:pledge:update --url http://localhost:8000/webhooks/patreon

Without --url the signature headers are printed. The file is sent byte for
byte; reformatting it after signing invalidates the signature.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from patreon_webhooks.authenticator import EVENT_HEADER, SIGNATURE_HEADER
from patreon_webhooks.decoder import decode_webhook
from patreon_webhooks.logging_config import configure_logging
from patreon_webhooks.signature import compute_signature

logger = logging.getLogger("sign_webhook")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sign-webhook",
        description="Sign a Patreon webhook body for local testing",
    )
    parser.add_argument("body", type=Path, help="Path to the JSON body")
    parser.add_argument(
        "--secret",
        default=os.environ.get("PATREON_WEBHOOK_SECRET", ""),
        help="Webhook secret (default: $PATREON_WEBHOOK_SECRET)",
    )
    parser.add_argument("--event", default="members:pledge:create", help="Event header value")
    parser.add_argument("--url", help="Receiver URL to POST the signed body to")
    parser.add_argument(
        "--no-check",
        action="store_true",
        help="Skip decoding the body locally before sending",
    )
    args = parser.parse_args(argv)

    if not args.secret:
        parser.error("a secret is required (--secret or PATREON_WEBHOOK_SECRET)")

    configure_logging()

    body = args.body.read_bytes()
    if not args.no_check:
        webhook = decode_webhook(body)
        logger.info(
            "body_decoded",
            extra={
                "type": webhook.data.type,
                "id": webhook.data.id,
                "tiers": len(webhook.tiers),
                "rewards": len(webhook.rewards),
                "goals": len(webhook.goals),
            },
        )

    headers = {
        "Content-Type": "application/json",
        EVENT_HEADER: args.event,
        SIGNATURE_HEADER: compute_signature(body, args.secret),
    }

    if not args.url:
        for name, value in headers.items():
            print(f"{name}: {value}")
        return 0

    import httpx

    resp = httpx.post(args.url, content=body, headers=headers, timeout=10.0)
    print(f"HTTP {resp.status_code}")
    print(resp.text)
    return 0 if resp.status_code < 300 else 1


if __name__ == "__main__":
    sys.exit(main())
