"""
Unit tests for engine/categories.py
"""

import pytest

from engine.categories import (
    category_display_name,
    classify,
    classify_place_types,
    merchant_from_mcc,
    merchant_from_place,
    mcc_for_category,
)
from engine.models import MERCHANT_CATEGORIES, SpendCategory


class TestClassify:
    """Tests for MCC classification."""

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("5812", SpendCategory.DINING),
            ("5814", SpendCategory.DINING),
            ("5411", SpendCategory.GROCERY),
            ("5542", SpendCategory.GAS),
            ("5912", SpendCategory.DRUGSTORE),
            ("4511", SpendCategory.TRAVEL),
            ("7011", SpendCategory.TRAVEL),
            ("7832", SpendCategory.ENTERTAINMENT),
            ("4121", SpendCategory.TRANSIT),
        ],
    )
    def test_known_codes(self, code, expected):
        assert classify(code) == expected

    def test_unknown_codes_are_other(self):
        assert classify("9999") == SpendCategory.OTHER
        assert classify("") == SpendCategory.OTHER
        assert classify("restaurant") == SpendCategory.OTHER

    def test_exact_match_only(self):
        """No trimming or prefix matching."""
        assert classify(" 5812") == SpendCategory.OTHER
        assert classify("58120") == SpendCategory.OTHER


class TestPlaceTypes:
    """Tests for place-type classification."""

    def test_first_recognized_type_wins(self):
        assert classify_place_types(["point_of_interest", "cafe", "supermarket"]) == SpendCategory.DINING

    def test_no_recognized_type(self):
        assert classify_place_types(["point_of_interest", "establishment"]) == SpendCategory.OTHER
        assert classify_place_types([]) == SpendCategory.OTHER

    def test_merchant_from_place(self):
        place = {
            "id": "place-1",
            "displayName": {"text": "Shell", "languageCode": "en"},
            "types": ["gas_station", "convenience_store"],
            "formattedAddress": "111 Fuel Dr",
            "location": {"latitude": 37.77, "longitude": -122.41},
        }

        merchant = merchant_from_place(place)

        assert merchant.id == "place-1"
        assert merchant.name == "Shell"
        assert merchant.category == SpendCategory.GAS
        assert merchant.mcc_code == "5541"
        assert merchant.address == "111 Fuel Dr"
        assert merchant.latitude == 37.77

    def test_merchant_from_place_without_location(self):
        merchant = merchant_from_place({"id": "p2", "displayName": {"text": "Shop"}, "types": []})

        assert merchant.category == SpendCategory.OTHER
        assert merchant.mcc_code == "5999"
        assert merchant.latitude is None


class TestHelpers:
    def test_merchant_from_mcc_resolves_category(self):
        merchant = merchant_from_mcc("cvs-1", "CVS Pharmacy", "5912", address="444 Health St")

        assert merchant.category == SpendCategory.DRUGSTORE
        assert merchant.mcc_code == "5912"
        assert merchant.address == "444 Health St"

    def test_every_merchant_category_has_mcc_and_display_name(self):
        for category in MERCHANT_CATEGORIES:
            assert mcc_for_category(category)
            assert category_display_name(category)

    def test_display_names(self):
        assert category_display_name(SpendCategory.GAS) == "Gas Station"
        assert category_display_name(SpendCategory.ONLINE_SHOPPING) == "Online Shopping"
        assert category_display_name(SpendCategory.CAR_RENTAL) == "Car Rental"

    def test_parse_category(self):
        assert SpendCategory.parse("Dining") == SpendCategory.DINING
        assert SpendCategory.parse("office") == SpendCategory.OTHER
        assert SpendCategory.parse(SpendCategory.GAS) is SpendCategory.GAS
