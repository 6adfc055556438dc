from engine.categories import category_display_name
from engine.cards import format_number
from engine.models import Merchant, Recommendation, RewardType
from app.schemas.recommendation_schemas import NotificationPayload


def reward_text(recommendation: Recommendation) -> str:
    """"3% back" for cashback cards, "4x points" / "2x miles" otherwise."""
    multiplier = format_number(recommendation.multiplier)
    reward_type = recommendation.card.reward_type
    if reward_type is RewardType.CASHBACK:
        return f"{multiplier}% back"
    return f"{multiplier}x {reward_type.value}"


def build_recommendation_notification(merchant: Merchant, recommendation: Recommendation) -> NotificationPayload:
    """Format the push alert telling the user which card to use at a merchant."""
    return NotificationPayload(
        title=f"Use {recommendation.card.name}",
        body=(
            f"At {merchant.name} ({category_display_name(merchant.category)}), "
            f"earn {reward_text(recommendation)}!"
        ),
        data={
            "merchantId": merchant.id,
            "cardId": recommendation.card.id,
        },
    )
