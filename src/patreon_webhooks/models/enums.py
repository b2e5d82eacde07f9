"""String enums for Patreon webhook discriminators and attribute values."""

from enum import StrEnum


class EntityKind(StrEnum):
    """Values of the ``type`` discriminator on ``included`` entries."""

    CAMPAIGN = "campaign"
    USER = "user"
    REWARD = "reward"
    TIER = "tier"
    GOAL = "goal"


class WebhookEvent(StrEnum):
    """Triggers sent in the ``X-Patreon-Event`` header."""

    MEMBERS_CREATE = "members:create"
    MEMBERS_UPDATE = "members:update"
    MEMBERS_DELETE = "members:delete"
    MEMBERS_PLEDGE_CREATE = "members:pledge:create"
    MEMBERS_PLEDGE_UPDATE = "members:pledge:update"
    MEMBERS_PLEDGE_DELETE = "members:pledge:delete"
    # v1 names
    PLEDGES_CREATE = "pledges:create"
    PLEDGES_UPDATE = "pledges:update"
    PLEDGES_DELETE = "pledges:delete"


class PatronStatus(StrEnum):
    ACTIVE_PATRON = "active_patron"
    DECLINED_PATRON = "declined_patron"
    FORMER_PATRON = "former_patron"


class ChargeStatus(StrEnum):
    PAID = "Paid"
    DECLINED = "Declined"
    DELETED = "Deleted"
    PENDING = "Pending"
    REFUNDED = "Refunded"
    FRAUD = "Fraud"
    REFUNDED_BY_PATREON = "Refunded by Patreon"
    PARTIALLY_REFUNDED = "Partially Refunded"
    FREE_TRIAL = "Free Trial"
    OTHER = "Other"
