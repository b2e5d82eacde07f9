"""Decoding of authenticated webhook bodies into the ``Webhook`` aggregate.

The body is a JSON:API document. ``data`` and ``links`` decode directly;
``included`` holds resources of several kinds told apart only by their
``type`` field, so each entry is peeked for its kind first and then decoded
with the model for that kind.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from patreon_webhooks.authenticator import EVENT_HEADER, SIGNATURE_HEADER, BodyReader, authenticate
from patreon_webhooks.errors.exceptions import MalformedPayloadError, UnknownEntityKindError
from patreon_webhooks.models.campaign import Campaign
from patreon_webhooks.models.common import Resource
from patreon_webhooks.models.enums import EntityKind
from patreon_webhooks.models.goal import Goal
from patreon_webhooks.models.member import Member
from patreon_webhooks.models.tier import Reward, Tier
from patreon_webhooks.models.user import User
from patreon_webhooks.models.webhook import VerifiedWebhook, Webhook

logger = logging.getLogger(__name__)

ENTITY_MODELS: dict[EntityKind, type[Resource]] = {
    EntityKind.CAMPAIGN: Campaign,
    EntityKind.USER: User,
    EntityKind.REWARD: Reward,
    EntityKind.TIER: Tier,
    EntityKind.GOAL: Goal,
}

# Kinds that may appear many times; the others fill a single slot.
_SEQUENCE_KINDS = (EntityKind.REWARD, EntityKind.TIER, EntityKind.GOAL)


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: Member
    links: dict[str, str] | None = None
    included: list[dict[str, Any]] | None = None


def _validation_details(exc: ValidationError) -> list[dict[str, Any]]:
    # Inputs are left out: they may hold member names and emails.
    return exc.errors(include_url=False, include_context=False, include_input=False)


def _peek_kind(entry: dict[str, Any], index: int) -> EntityKind:
    kind = entry.get("type")
    if not isinstance(kind, str):
        raise MalformedPayloadError(
            f"Included resource at index {index} has no type",
            details={"index": index},
        )
    try:
        return EntityKind(kind)
    except ValueError:
        raise UnknownEntityKindError(kind, index) from None


def _decode_entry(kind: EntityKind, entry: dict[str, Any], index: int) -> Resource:
    try:
        return ENTITY_MODELS[kind].model_validate(entry)
    except ValidationError as exc:
        raise MalformedPayloadError(
            f"Included {kind} at index {index} is invalid",
            details=_validation_details(exc),
        ) from exc


def decode_webhook(raw_body: bytes) -> Webhook:
    """Decode an authenticated webhook body.

    Decoding is all-or-nothing: the aggregate is built only once every
    ``included`` entry has decoded. ``campaign`` and ``user`` keep the last
    entry of their kind; rewards, tiers and goals keep source order.

    Args:
        raw_body: The exact bytes returned by ``authenticate``.

    Returns:
        The decoded ``Webhook``.

    Raises:
        MalformedPayloadError: If the body or any entry has the wrong shape.
        UnknownEntityKindError: If an ``included`` entry has an unmodelled type.
    """
    try:
        envelope = _Envelope.model_validate_json(raw_body)
    except ValidationError as exc:
        raise MalformedPayloadError(
            "Webhook body is not a valid JSON:API document",
            details=_validation_details(exc),
        ) from exc

    singles: dict[EntityKind, Resource] = {}
    sequences: dict[EntityKind, list[Resource]] = {kind: [] for kind in _SEQUENCE_KINDS}

    for index, entry in enumerate(envelope.included or []):
        kind = _peek_kind(entry, index)
        resource = _decode_entry(kind, entry, index)
        if kind in sequences:
            sequences[kind].append(resource)
        else:
            singles[kind] = resource

    webhook = Webhook(
        data=envelope.data,
        links=envelope.links or {},
        campaign=singles.get(EntityKind.CAMPAIGN),
        user=singles.get(EntityKind.USER),
        rewards=tuple(sequences[EntityKind.REWARD]),
        tiers=tuple(sequences[EntityKind.TIER]),
        goals=tuple(sequences[EntityKind.GOAL]),
    )
    logger.debug(
        "webhook_decoded",
        extra={
            "member_id": webhook.data.id,
            "included": len(envelope.included or []),
            "rewards": len(webhook.rewards),
            "tiers": len(webhook.tiers),
            "goals": len(webhook.goals),
        },
    )
    return webhook


def verify_and_decode(
    headers: Mapping[str, str],
    body_reader: BodyReader | bytes | bytearray,
    secret: str,
    event_header: str = EVENT_HEADER,
    signature_header: str = SIGNATURE_HEADER,
) -> VerifiedWebhook:
    """Authenticate a request and decode its body in one call."""
    raw_body, event = authenticate(headers, body_reader, secret, event_header, signature_header)
    return VerifiedWebhook(event=event, webhook=decode_webhook(raw_body))
