"""Pydantic models for Tier and its v1 name, Reward.

Both describe a pledge level. Patreon renamed ``reward`` to ``tier`` between
API versions, so the attribute sets overlap almost entirely.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from patreon_webhooks.models.common import Attributes, Resource, ToManyRelationship, ToOneRelationship


class TierAttributes(Attributes):
    amount_cents: int | None = None
    created_at: datetime | None = None
    description: str | None = None
    discord_role_ids: tuple[str, ...] | None = None
    edited_at: datetime | None = None
    image_url: str | None = None
    patron_count: int | None = None
    post_count: int | None = None
    published: bool | None = None
    published_at: datetime | None = None
    remaining: int | None = None
    requires_shipping: bool | None = None
    title: str | None = None
    unpublished_at: datetime | None = None
    url: str | None = None
    user_limit: int | None = None


class RewardAttributes(TierAttributes):
    # Whole-dollar amount, only present in v1 payloads.
    amount: int | None = None


class TierRelationships(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    benefits: ToManyRelationship | None = None
    campaign: ToOneRelationship | None = None
    tier_image: ToOneRelationship | None = None


class Tier(Resource):
    attributes: TierAttributes = Field(default_factory=TierAttributes)
    relationships: TierRelationships = Field(default_factory=TierRelationships)


class Reward(Resource):
    attributes: RewardAttributes = Field(default_factory=RewardAttributes)
    relationships: TierRelationships = Field(default_factory=TierRelationships)
