"""Tests for the entity Pydantic models."""

import pytest
from pydantic import ValidationError

from patreon_webhooks.models.campaign import Campaign
from patreon_webhooks.models.common import ResourceIdentifier, ToManyRelationship
from patreon_webhooks.models.enums import ChargeStatus, PatronStatus
from patreon_webhooks.models.goal import Goal
from patreon_webhooks.models.member import Member
from patreon_webhooks.models.tier import Reward, Tier
from patreon_webhooks.models.user import User


class TestResourceId:
    @pytest.mark.parametrize("raw", ["12345", 12345])
    def test_string_or_number(self, raw):
        assert ResourceIdentifier.model_validate({"id": raw, "type": "user"}).id == "12345"

    def test_negative_number(self):
        assert ResourceIdentifier.model_validate({"id": -1, "type": "reward"}).id == "-1"

    @pytest.mark.parametrize("raw", [True, 1.5, None, "", [1], {"id": 1}])
    def test_rejects_other_types(self, raw):
        with pytest.raises(ValidationError):
            ResourceIdentifier.model_validate({"id": raw, "type": "user"})

    def test_from_json_number(self):
        tier = Tier.model_validate_json('{"id": 9001, "type": "tier"}')
        assert tier.id == "9001"


class TestNullableAttributes:
    def test_integer_null_is_absent(self):
        goal = Goal.model_validate({"id": "1", "type": "goal", "attributes": {"amount_cents": None}})
        assert goal.attributes.amount_cents is None

    def test_integer_zero_is_kept(self):
        goal = Goal.model_validate({"id": "1", "type": "goal", "attributes": {"amount_cents": 0}})
        assert goal.attributes.amount_cents == 0

    def test_string_null_is_absent(self):
        campaign = Campaign.model_validate(
            {"id": "1", "type": "campaign", "attributes": {"one_liner": None}}
        )
        assert campaign.attributes.one_liner is None

    def test_string_value_is_kept(self):
        campaign = Campaign.model_validate(
            {"id": "1", "type": "campaign", "attributes": {"one_liner": "Hi"}}
        )
        assert campaign.attributes.one_liner == "Hi"

    def test_missing_attribute_is_absent(self):
        member = Member.model_validate({"id": "1", "type": "member"})
        assert member.attributes.pledge_cap_amount_cents is None
        assert member.attributes.patron_status is None
        assert not member.is_active

    def test_numeric_string_for_integer(self):
        member = Member.model_validate(
            {"id": "1", "type": "member", "attributes": {"pledge_cap_amount_cents": "250"}}
        )
        assert member.attributes.pledge_cap_amount_cents == 250

    def test_known_statuses_are_enum_members(self):
        member = Member.model_validate(
            {
                "id": "1",
                "type": "member",
                "attributes": {"patron_status": "active_patron", "last_charge_status": "Paid"},
            }
        )
        assert member.attributes.patron_status is PatronStatus.ACTIVE_PATRON
        assert member.attributes.last_charge_status is ChargeStatus.PAID
        assert member.is_active

    @pytest.mark.parametrize("field", ["patron_status", "last_charge_status"])
    def test_undocumented_status_is_kept_as_string(self, field):
        member = Member.model_validate(
            {"id": "1", "type": "member", "attributes": {field: "Some New Status"}}
        )
        value = getattr(member.attributes, field)
        assert value == "Some New Status"
        assert type(value) is str
        assert not member.is_active


class TestSchemaDrift:
    def test_unknown_attributes_ignored(self):
        user = User.model_validate(
            {"id": "1", "type": "user", "attributes": {"brand_new_field": 1, "full_name": "A"}}
        )
        assert user.attributes.full_name == "A"
        assert not hasattr(user.attributes, "brand_new_field")

    def test_social_connection_as_plain_string(self):
        user = User.model_validate(
            {"id": "1", "type": "user", "attributes": {"social_connections": {"twitch": "https://twitch.tv/x"}}}
        )
        assert user.attributes.social_connections.twitch == "https://twitch.tv/x"

    def test_reward_has_whole_dollar_amount(self):
        reward = Reward.model_validate({"id": 1, "type": "reward", "attributes": {"amount": 5}})
        assert reward.attributes.amount == 5
        assert not hasattr(Tier.model_validate({"id": 1, "type": "tier"}).attributes, "amount")


class TestRelationships:
    def test_null_to_many_is_empty(self):
        assert ToManyRelationship.model_validate({"data": None}).data == ()

    def test_to_many_ids(self):
        rel = ToManyRelationship.model_validate(
            {"data": [{"id": 1, "type": "goal"}, {"id": "2", "type": "goal"}]}
        )
        assert rel.ids == ["1", "2"]


class TestImmutability:
    def test_models_are_frozen(self):
        goal = Goal.model_validate({"id": "1", "type": "goal", "attributes": {"title": "G"}})
        with pytest.raises(ValidationError):
            goal.id = "2"
        with pytest.raises(ValidationError):
            goal.attributes.title = "H"
