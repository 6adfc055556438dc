"""
Card reward model and reward estimator.
Pure lookups over a card's reward structure; nothing here raises for
missing data, the card's base reward is always the floor.
"""

from decimal import Decimal, ROUND_HALF_UP

from engine.models import CreditCard, RewardType, SpendCategory


# Illustrative purchase amount used for estimates
DEFAULT_REFERENCE_SPEND = 100


def format_number(value: float) -> str:
    """
    Render a multiplier or reward amount in its shortest form.

    Example:
        >>> format_number(4.0)
        '4'
        >>> format_number(1.5)
        '1.5'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def reward_for(card: CreditCard, category: SpendCategory) -> tuple[float, str]:
    """
    Return (multiplier, description) for a card at a spending category.

    Rules:
    - The first reward-structure entry whose category matches wins, even if
      a later entry for the same category has a higher multiplier.
    - With no matching entry, the card's base reward applies and the
      description is "{base}x {reward type} on all purchases".
    - A matching entry with an empty description keeps its multiplier but
      uses that same generated description.

    Args:
        card: CreditCard to evaluate
        category: the merchant's spending category

    Returns:
        Tuple of (multiplier, description)
    """
    fallback = f"{format_number(card.base_reward)}x {card.reward_type.value} on all purchases"
    for reward in card.reward_structure:
        if reward.category == category:
            return reward.multiplier, reward.description or fallback

    return card.base_reward, fallback


def multiplier_for(card: CreditCard, category: SpendCategory) -> float:
    return reward_for(card, category)[0]


def reward_description(card: CreditCard, category: SpendCategory) -> str:
    return reward_for(card, category)[1]


def estimate_reward(
    multiplier: float,
    reward_type: RewardType,
    reference_spend: float = DEFAULT_REFERENCE_SPEND,
) -> str:
    """
    Format the reward earned on a reference purchase.

    - cashback: "$X.XX cash back per $100", where X.XX is the float
      multiplier * spend / 100 rounded half-up to cents
    - points / miles: "{multiplier * spend} {type} per $100 spent"

    The label always reads "per $100"; reference_spend only scales the amount.

    Raises:
        ValueError: if reward_type is not a RewardType member
    """
    earned = multiplier * reference_spend

    if reward_type is RewardType.CASHBACK:
        # Round the float quotient, so 1.005 (really 1.00499...) gives 1.00
        dollars = Decimal(earned / 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return f"${dollars} cash back per $100"
    if reward_type is RewardType.POINTS or reward_type is RewardType.MILES:
        return f"{format_number(earned)} {reward_type.value} per $100 spent"
    raise ValueError(f"Unknown reward type: {reward_type!r}")
