"""Pydantic model for the Campaign entity."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from patreon_webhooks.models.common import Attributes, Resource, ToManyRelationship, ToOneRelationship


class CampaignAttributes(Attributes):
    avatar_photo_url: str | None = None
    cover_photo_url: str | None = None
    created_at: datetime | None = None
    creation_count: int | None = None
    creation_name: str | None = None
    discord_server_id: str | None = None
    display_patron_goals: bool | None = None
    earnings_visibility: str | None = None
    google_analytics_id: str | None = None
    has_rss: bool | None = None
    has_sent_rss_notify: bool | None = None
    image_small_url: str | None = None
    image_url: str | None = None
    is_charge_upfront: bool | None = None
    is_charged_immediately: bool | None = None
    is_monthly: bool | None = None
    is_nsfw: bool | None = None
    is_plural: bool | None = None
    main_video_embed: str | None = None
    main_video_url: str | None = None
    name: str | None = None
    one_liner: str | None = None
    outstanding_payment_amount_cents: int | None = None
    patron_count: int | None = None
    pay_per_name: str | None = None
    pledge_sum: int | None = None
    pledge_url: str | None = None
    published_at: datetime | None = None
    rss_artwork_url: str | None = None
    rss_feed_title: str | None = None
    summary: str | None = None
    thanks_embed: str | None = None
    thanks_msg: str | None = None
    thanks_video_url: str | None = None
    url: str | None = None
    vanity: str | None = None


class CampaignRelationships(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    creator: ToOneRelationship | None = None
    goals: ToManyRelationship | None = None
    rewards: ToManyRelationship | None = None
    tiers: ToManyRelationship | None = None


class Campaign(Resource):
    attributes: CampaignAttributes = Field(default_factory=CampaignAttributes)
    relationships: CampaignRelationships = Field(default_factory=CampaignRelationships)
