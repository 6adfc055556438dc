import pytest

from app.schemas.recommendation_schemas import MerchantRequest
from app.services.catalog_service import CatalogService
from app.services.recommendation_service import RecommendationService, resolve_merchant
from app.services.wallet_service import WalletService
from factories import DEFAULT_WALLET, TEST_CARDS
from engine.models import MERCHANT_CATEGORIES, SpendCategory


class TestResolveMerchant:
    def test_explicit_category_wins(self):
        # Arrange
        payload = MerchantRequest(id="m_1", name="Mixed", category="grocery", mcc_code="5812", place_types=["bar"])

        # Act
        merchant = resolve_merchant(payload)

        # Assert
        assert merchant.category == SpendCategory.GROCERY
        assert merchant.mcc_code == "5812"

    def test_mcc_code_is_classified(self):
        merchant = resolve_merchant(MerchantRequest(id="m_1", name="Shell", mcc_code="5541"))

        assert merchant.category == SpendCategory.GAS
        assert merchant.mcc_code == "5541"

    def test_place_types_get_representative_mcc(self):
        # Arrange
        payload = MerchantRequest(id="m_1", name="Cafe", place_types=["point_of_interest", "cafe"])

        # Act
        merchant = resolve_merchant(payload)

        # Assert
        assert merchant.category == SpendCategory.DINING
        assert merchant.mcc_code == "5812"

    @pytest.mark.parametrize(
        "payload",
        [
            MerchantRequest(id="m_1", name="Nowhere"),
            MerchantRequest(id="m_1", name="Odd", category="not-a-category"),
            MerchantRequest(id="m_1", name="Odd", mcc_code="0000"),
            MerchantRequest(id="m_1", name="Shop", category="amazon"),
            MerchantRequest(id="m_1", name="Airline", category="flights"),
        ],
    )
    def test_unresolvable_merchant_is_other(self, payload):
        assert resolve_merchant(payload).category == SpendCategory.OTHER

    def test_catalog_only_category_is_never_a_merchant_category(self):
        # Arrange
        payload = MerchantRequest(id="m_1", name="Shop", category="rotating")

        # Act
        merchant = resolve_merchant(payload)

        # Assert
        assert merchant.category in MERCHANT_CATEGORIES
        assert merchant.mcc_code == "5999"


class TestRecommendationService:
    @pytest.fixture
    def service(self, db_session):
        catalog_service = CatalogService(db_session)
        catalog_service.seed_cards(TEST_CARDS)
        wallet_service = WalletService(db_session, default_card_ids=DEFAULT_WALLET)
        return RecommendationService(db_session, catalog_service, wallet_service)

    def test_uses_stored_wallet(self, service):
        # Arrange
        merchant = resolve_merchant(MerchantRequest(id="m_1", name="Diner", mcc_code="5812"))

        # Act
        result = service.recommend(user_id="u_1", merchant=merchant)

        # Assert
        assert result.best.card.id == "amex-gold"
        assert [rec.card.id for rec in result.alternatives] == [
            "chase-sapphire-preferred",
            "chase-freedom-unlimited",
            "citi-double-cash",
        ]
        assert result.upsell.card.id == "dining-max"
        assert result.upsell.estimated_reward == "$5.00 cash back per $100"

    def test_card_ids_override_wallet(self, service):
        # Arrange
        merchant = resolve_merchant(MerchantRequest(id="m_1", name="Shell", mcc_code="5541"))

        # Act
        result = service.recommend(user_id="u_1", merchant=merchant, card_ids=["amex-gold", "chase-freedom-unlimited"])

        # Assert
        assert result.best.card.id == "chase-freedom-unlimited"
        assert [rec.card.id for rec in result.ranked] == ["chase-freedom-unlimited", "amex-gold"]
        assert result.upsell.card.id == "citi-double-cash"

    def test_empty_override_has_no_best(self, service):
        # Arrange
        merchant = resolve_merchant(MerchantRequest(id="m_1", name="Diner", mcc_code="5812"))

        # Act
        result = service.recommend(user_id="u_1", merchant=merchant, card_ids=[])

        # Assert
        assert result.best is None
        assert result.alternatives == ()
        assert result.upsell.card.id == "dining-max"
