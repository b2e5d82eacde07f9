"""Pydantic models for the decoded webhook aggregate."""

from itertools import chain

from pydantic import BaseModel, ConfigDict, Field

from patreon_webhooks.models.campaign import Campaign
from patreon_webhooks.models.enums import WebhookEvent
from patreon_webhooks.models.goal import Goal
from patreon_webhooks.models.member import Member
from patreon_webhooks.models.tier import Reward, Tier
from patreon_webhooks.models.user import User


class Webhook(BaseModel):
    """A decoded webhook body with the ``included`` array flattened by kind."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    data: Member
    links: dict[str, str] = Field(default_factory=dict)
    campaign: Campaign | None = None
    user: User | None = None
    rewards: tuple[Reward, ...] = ()
    tiers: tuple[Tier, ...] = ()
    goals: tuple[Goal, ...] = ()

    def tiers_and_rewards(self) -> list[Tier | Reward]:
        """Pledge levels under either protocol name, tiers first."""
        return list(chain(self.tiers, self.rewards))


class VerifiedWebhook(BaseModel):
    """An authenticated request: the declared event plus the decoded body."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    event: str
    webhook: Webhook

    @property
    def known_event(self) -> WebhookEvent | None:
        """The event as a ``WebhookEvent``, or None for an undocumented trigger."""
        try:
            return WebhookEvent(self.event)
        except ValueError:
            return None
