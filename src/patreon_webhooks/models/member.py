"""Pydantic model for the primary ``data`` record (a member, or a pledge in v1)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from patreon_webhooks.models.common import Attributes, Resource, ToManyRelationship, ToOneRelationship
from patreon_webhooks.models.enums import ChargeStatus, PatronStatus


class MemberAttributes(Attributes):
    # Status values Patreon adds later decode as plain strings.
    currently_entitled_amount_cents: int | None = None
    email: str | None = None
    full_name: str | None = None
    is_follower: bool | None = None
    last_charge_date: datetime | None = None
    last_charge_status: ChargeStatus | str | None = Field(None, union_mode="left_to_right")
    lifetime_support_cents: int | None = None
    note: str | None = None
    patron_status: PatronStatus | str | None = Field(None, union_mode="left_to_right")
    pledge_amount_cents: int | None = None
    pledge_cap_amount_cents: int | None = None
    pledge_relationship_start: datetime | None = None
    will_pay_amount_cents: int | None = None


class MemberRelationships(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    address: ToOneRelationship | None = None
    campaign: ToOneRelationship | None = None
    currently_entitled_tiers: ToManyRelationship | None = None
    user: ToOneRelationship | None = None


class Member(Resource):
    attributes: MemberAttributes = Field(default_factory=MemberAttributes)
    relationships: MemberRelationships = Field(default_factory=MemberRelationships)

    @property
    def is_active(self) -> bool:
        return self.attributes.patron_status == PatronStatus.ACTIVE_PATRON
