"""Unit tests for the Fundraiser aggregate."""

import pytest

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.fundraiser import (
    Fundraiser,
    FundraiserDonationPolicy,
    FundraiserVariation,
)
from storefront.domain.model.value_objects import Money


def _fundraiser(policy=None, **kwargs):
    return Fundraiser.create(
        id="f1",
        title=kwargs.pop("title", "Hawks Booster Club"),
        custom_link=kwargs.pop("custom_link", "Hawks"),
        base_price=Money.of("20"),
        policy=policy or FundraiserDonationPolicy.percentage(15),
        variations=kwargs.pop(
            "variations", [FundraiserVariation("v1", "Team Tee", Money.of("20"))]
        ),
        **kwargs,
    )


class TestFundraiserCreate:

    def test_custom_link_lowercased(self):
        assert _fundraiser().custom_link == "hawks"

    def test_custom_link_with_slash_rejected(self):
        with pytest.raises(ValidationError, match="may not contain"):
            _fundraiser(custom_link="hawks/club")

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError, match="title is required"):
            _fundraiser(title=" ")

    def test_duplicate_variation_ids_rejected(self):
        variations = [
            FundraiserVariation("v1", "Tee", Money.of("20")),
            FundraiserVariation("v1", "Hoodie", Money.of("40")),
        ]
        with pytest.raises(ValidationError, match="unique"):
            _fundraiser(variations=variations)

    def test_new_fundraiser_is_active(self):
        assert _fundraiser().is_active


class TestFundraiserQueries:

    def test_variation_lookup(self):
        assert _fundraiser().variation("v1").title == "Team Tee"

    def test_unknown_variation(self):
        with pytest.raises(EntityNotFoundError, match="Variation 'v9' not found"):
            _fundraiser().variation("v9")

    def test_percentage_donation_text(self):
        text = _fundraiser().donation_text(Money.of("42.5"))
        assert text == (
            "15% of each item purchase (excluding shipping) is donated to "
            "Hawks Booster Club, $42.50 raised so far!"
        )

    def test_fixed_donation_text(self):
        fundraiser = _fundraiser(policy=FundraiserDonationPolicy.fixed("2"))
        assert fundraiser.donation_text(Money.zero()) == (
            "$2.00 of each item bought is donated to Hawks Booster Club, $0.00 raised so far!"
        )
