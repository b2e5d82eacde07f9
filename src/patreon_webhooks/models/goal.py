"""Pydantic model for the Goal entity."""

from datetime import datetime

from pydantic import Field

from patreon_webhooks.models.common import Attributes, Resource


class GoalAttributes(Attributes):
    amount_cents: int | None = None
    completed_percentage: int | None = None
    created_at: datetime | None = None
    description: str | None = None
    reached_at: datetime | None = None
    title: str | None = None


class Goal(Resource):
    attributes: GoalAttributes = Field(default_factory=GoalAttributes)
