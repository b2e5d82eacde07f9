"""Pydantic model for the User entity (the patron behind a membership)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from patreon_webhooks.models.common import Attributes, Resource, ResourceId, ToOneRelationship


class SocialAccount(BaseModel):
    """A linked third-party account; any of these may be sent as ``null``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    scopes: tuple[str, ...] | None = None
    url: str | None = None
    user_id: ResourceId | None = None


class SocialConnections(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    deviantart: SocialAccount | str | None = None
    discord: SocialAccount | str | None = None
    facebook: SocialAccount | str | None = None
    google: SocialAccount | str | None = None
    instagram: SocialAccount | str | None = None
    reddit: SocialAccount | str | None = None
    spotify: SocialAccount | str | None = None
    twitch: SocialAccount | str | None = None
    twitter: SocialAccount | str | None = None
    vimeo: SocialAccount | str | None = None
    youtube: SocialAccount | str | None = None


class UserAttributes(Attributes):
    about: str | None = None
    can_see_nsfw: bool | None = None
    created: datetime | None = None
    default_country_code: str | None = None
    discord_id: str | None = None
    email: str | None = None
    facebook: str | None = None
    facebook_id: ResourceId | None = None
    first_name: str | None = None
    full_name: str | None = None
    gender: int | None = None
    has_password: bool | None = None
    hide_pledges: bool | None = None
    image_url: str | None = None
    is_creator: bool | None = None
    is_deleted: bool | None = None
    is_email_verified: bool | None = None
    is_nuked: bool | None = None
    is_suspended: bool | None = None
    last_name: str | None = None
    like_count: int | None = None
    social_connections: SocialConnections | None = None
    thumb_url: str | None = None
    twitch: str | None = None
    twitter: str | None = None
    url: str | None = None
    vanity: str | None = None
    youtube: str | None = None


class UserRelationships(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    campaign: ToOneRelationship | None = None


class User(Resource):
    attributes: UserAttributes = Field(default_factory=UserAttributes)
    relationships: UserRelationships = Field(default_factory=UserRelationships)
