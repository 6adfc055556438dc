import pytest

from app.models.wallet import UserWallet
from app.services.wallet_service import WalletService
from factories import DEFAULT_WALLET


@pytest.fixture
def wallet_service(db_session):
    return WalletService(db_session, default_card_ids=DEFAULT_WALLET)


class TestDefaultWallet:
    def test_new_user_gets_default_cards(self, wallet_service):
        """First access creates the default wallet with the first card as default."""
        # Act
        wallet = wallet_service.get_wallet("u_1")

        # Assert
        assert [card.card_id for card in wallet.cards] == DEFAULT_WALLET
        assert wallet.default_card_id == "amex-gold"

    def test_wallet_is_created_once(self, wallet_service, db_session):
        # Act
        wallet_service.get_wallet("u_1")
        wallet_service.get_wallet("u_1")

        # Assert
        assert db_session.query(UserWallet).count() == 1

    def test_wallets_are_per_user(self, wallet_service):
        # Arrange
        wallet_service.remove_card("u_1", "amex-gold")

        # Act
        other = wallet_service.get_user_card_ids("u_2")

        # Assert
        assert other == DEFAULT_WALLET
        assert "amex-gold" not in wallet_service.get_user_card_ids("u_1")


class TestAddRemove:
    def test_add_card_appends_in_order(self, wallet_service):
        # Act
        added = wallet_service.add_card("u_1", "dining-max", nickname="Food card")

        # Assert
        assert added is True
        assert wallet_service.get_user_card_ids("u_1") == DEFAULT_WALLET + ["dining-max"]
        assert wallet_service.has_card("u_1", "dining-max")

    def test_add_duplicate_returns_false(self, wallet_service):
        # Act
        added = wallet_service.add_card("u_1", "citi-double-cash")

        # Assert
        assert added is False
        assert wallet_service.get_user_card_ids("u_1").count("citi-double-cash") == 1

    def test_first_card_in_empty_wallet_becomes_default(self, db_session):
        # Arrange
        service = WalletService(db_session, default_card_ids=[])

        # Act
        service.add_card("u_1", "citi-double-cash")

        # Assert
        assert service.get_wallet("u_1").default_card_id == "citi-double-cash"

    def test_remove_default_moves_default_to_first_remaining(self, wallet_service):
        # Act
        removed = wallet_service.remove_card("u_1", "amex-gold")

        # Assert
        assert removed is True
        assert wallet_service.get_wallet("u_1").default_card_id == "chase-sapphire-preferred"

    def test_remove_last_card_clears_default(self, db_session):
        # Arrange
        service = WalletService(db_session, default_card_ids=["citi-double-cash"])

        # Act
        service.remove_card("u_1", "citi-double-cash")

        # Assert
        wallet = service.get_wallet("u_1")
        assert wallet.cards == []
        assert wallet.default_card_id is None

    def test_remove_missing_card_returns_false(self, wallet_service):
        assert wallet_service.remove_card("u_1", "dining-max") is False


class TestDefaultAndReset:
    def test_set_default_card(self, wallet_service):
        # Act
        ok = wallet_service.set_default_card("u_1", "citi-double-cash")

        # Assert
        assert ok is True
        assert wallet_service.get_wallet("u_1").default_card_id == "citi-double-cash"

    def test_set_default_requires_owned_card(self, wallet_service):
        # Act
        ok = wallet_service.set_default_card("u_1", "dining-max")

        # Assert
        assert ok is False
        assert wallet_service.get_wallet("u_1").default_card_id == "amex-gold"

    def test_reset_restores_defaults(self, wallet_service):
        # Arrange
        wallet_service.add_card("u_1", "dining-max")
        wallet_service.remove_card("u_1", "amex-gold")

        # Act
        wallet = wallet_service.reset_to_defaults("u_1")

        # Assert
        assert [card.card_id for card in wallet.cards] == DEFAULT_WALLET
        assert wallet.default_card_id == "amex-gold"

    def test_clear_wallet_for_unknown_user_is_noop(self, wallet_service, db_session):
        # Act
        wallet_service.clear_wallet("nobody")

        # Assert
        assert db_session.query(UserWallet).count() == 0
