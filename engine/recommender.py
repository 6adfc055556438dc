"""
Recommendation engine.
Ranks a user's cards for a merchant and looks for upsell cards the user
does not own. Every function is a pure computation over its arguments and
the (immutable) card catalog.
"""

import logging
from typing import Iterable, List, Optional

from engine.cards import DEFAULT_REFERENCE_SPEND, estimate_reward, reward_for
from engine.catalog import CardCatalog, default_catalog
from engine.models import CreditCard, Merchant, Recommendation, RecommendationResult


logger = logging.getLogger(__name__)

# How many runner-up cards alternative_cards returns
MAX_ALTERNATIVES = 3


def _resolve_catalog(catalog: Optional[CardCatalog]) -> CardCatalog:
    return catalog if catalog is not None else default_catalog()


def resolve_owned_cards(
    owned_card_ids: Iterable[str],
    catalog: Optional[CardCatalog] = None,
    exclude_card_id: Optional[str] = None,
) -> List[CreditCard]:
    """
    Look up owned card ids in the catalog, keeping wallet order.

    Ids the catalog does not know are dropped; the wallet and the catalog
    can drift apart.
    """
    catalog = _resolve_catalog(catalog)
    cards = []
    for card_id in owned_card_ids:
        card = catalog.get_card_by_id(card_id)
        if card is None:
            logger.debug("Dropping unknown card id %s from wallet", card_id)
            continue
        if exclude_card_id is not None and card.id == exclude_card_id:
            continue
        cards.append(card)
    return cards


def build_recommendation(
    card: CreditCard,
    merchant: Merchant,
    reference_spend: float = DEFAULT_REFERENCE_SPEND,
) -> Recommendation:
    """Evaluate one card at a merchant. Multiplier, estimate and reason share one lookup."""
    multiplier, reason = reward_for(card, merchant.category)
    return Recommendation(
        card=card,
        merchant=merchant,
        multiplier=multiplier,
        estimated_reward=estimate_reward(multiplier, card.reward_type, reference_spend),
        reason=reason,
    )


def _rank(recommendations: List[Recommendation]) -> List[Recommendation]:
    # sorted() is stable, so equal multipliers keep wallet order
    return sorted(recommendations, key=lambda rec: rec.multiplier, reverse=True)


def best_owned_card(
    merchant: Merchant,
    owned_card_ids: Iterable[str],
    catalog: Optional[CardCatalog] = None,
) -> Optional[Recommendation]:
    """
    Pick the owned card with the highest multiplier at this merchant.

    Ties go to the earliest card in wallet order.

    Returns:
        Recommendation for the winning card, or None if no owned id
        resolves to a catalog card
    """
    cards = resolve_owned_cards(owned_card_ids, catalog)
    if not cards:
        return None

    best = build_recommendation(cards[0], merchant)
    for card in cards[1:]:
        candidate = build_recommendation(card, merchant)
        if candidate.multiplier > best.multiplier:
            best = candidate

    logger.debug(
        "Best owned card for %s (%s): %s at %sx",
        merchant.name, merchant.category.value, best.card.id, best.multiplier,
    )
    return best


def alternative_cards(
    merchant: Merchant,
    owned_card_ids: Iterable[str],
    exclude_card_id: str,
    catalog: Optional[CardCatalog] = None,
) -> List[Recommendation]:
    """
    Rank the remaining owned cards after removing the recommended one.

    Returns:
        Up to MAX_ALTERNATIVES recommendations, highest multiplier first
    """
    cards = resolve_owned_cards(owned_card_ids, catalog, exclude_card_id=exclude_card_id)
    ranked = _rank([build_recommendation(card, merchant) for card in cards])
    return ranked[:MAX_ALTERNATIVES]


def best_card_overall(
    merchant: Merchant,
    owned_card_ids: Iterable[str],
    catalog: Optional[CardCatalog] = None,
) -> Optional[Recommendation]:
    """
    Find a card the user does not own that beats everything they do own.

    Rules:
    - Candidates are every catalog card whose id is not in owned_card_ids.
    - The user's baseline is best_owned_card's multiplier, or 0 with an
      empty wallet.
    - The best candidate is the first to reach a strictly higher multiplier.
    - It is only returned if it strictly beats the baseline.

    Returns:
        Recommendation for the upsell card, or None
    """
    catalog = _resolve_catalog(catalog)
    owned_card_ids = list(owned_card_ids)
    owned = set(owned_card_ids)

    non_owned = [card for card in catalog.cards if card.id not in owned]
    if not non_owned:
        return None

    user_best = best_owned_card(merchant, owned_card_ids, catalog)
    baseline = user_best.multiplier if user_best is not None else 0

    best: Optional[Recommendation] = None
    best_multiplier = 0
    for card in non_owned:
        candidate = build_recommendation(card, merchant)
        if candidate.multiplier > best_multiplier:
            best_multiplier = candidate.multiplier
            best = candidate

    if best is None or best.multiplier <= baseline:
        return None

    logger.debug(
        "Upsell for %s (%s): %s at %sx beats owned %sx",
        merchant.name, merchant.category.value, best.card.id, best.multiplier, baseline,
    )
    return best


def all_cards_ranked(
    merchant: Merchant,
    owned_card_ids: Iterable[str],
    catalog: Optional[CardCatalog] = None,
) -> List[Recommendation]:
    """Every resolvable owned card, highest multiplier first, wallet order on ties."""
    cards = resolve_owned_cards(owned_card_ids, catalog)
    return _rank([build_recommendation(card, merchant) for card in cards])


def recommend(
    merchant: Merchant,
    owned_card_ids: Iterable[str],
    catalog: Optional[CardCatalog] = None,
) -> RecommendationResult:
    """
    Run every ranking for one merchant visit.

    Args:
        merchant: Merchant the user is at
        owned_card_ids: wallet card ids, in wallet order
        catalog: card catalog (bundled catalog if not provided)

    Returns:
        RecommendationResult with best card, alternatives, upsell and full ranking
    """
    catalog = _resolve_catalog(catalog)
    owned_card_ids = list(owned_card_ids)

    best = best_owned_card(merchant, owned_card_ids, catalog)
    alternatives = (
        alternative_cards(merchant, owned_card_ids, best.card.id, catalog) if best else []
    )
    return RecommendationResult(
        merchant=merchant,
        best=best,
        alternatives=tuple(alternatives),
        upsell=best_card_overall(merchant, owned_card_ids, catalog),
        ranked=tuple(all_cards_ranked(merchant, owned_card_ids, catalog)),
    )
