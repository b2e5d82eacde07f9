"""Shared test fixtures."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from helpers import SECRET, load_fixture


@pytest.fixture
def secret() -> str:
    return SECRET


@pytest.fixture
def member_body() -> bytes:
    return load_fixture("members_pledge_create.json")


@pytest.fixture
def pledge_v1_body() -> bytes:
    return load_fixture("pledges_create_v1.json")


@pytest.fixture
def app(monkeypatch):
    """A FastAPI app with a single receiver route using the dependency."""
    from patreon_webhooks.api.dependencies import VerifiedWebhookDep
    from patreon_webhooks.config import settings
    from patreon_webhooks.errors.handlers import register_exception_handlers

    monkeypatch.setattr(settings, "webhook_secret", SECRET)

    _app = FastAPI()
    register_exception_handlers(_app)

    @_app.post("/webhooks/patreon")
    async def receive(hook: VerifiedWebhookDep) -> dict:
        webhook = hook.webhook
        return {
            "event": hook.event,
            "member_id": webhook.data.id,
            "campaign": webhook.campaign.attributes.name if webhook.campaign else None,
            "tiers": [tier.id for tier in webhook.tiers],
        }

    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
