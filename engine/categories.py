"""
Merchant category classification.
Maps merchant category codes (MCC) and place-search types to a SpendCategory.
Every lookup is total: anything unrecognized resolves to OTHER.
"""

from typing import Iterable, Optional

from engine.models import Merchant, SpendCategory


# MCC code -> spending category
MCC_CATEGORY_MAP = {
    # Dining
    "5812": SpendCategory.DINING,
    "5813": SpendCategory.DINING,
    "5814": SpendCategory.DINING,
    # Grocery
    "5411": SpendCategory.GROCERY,
    "5422": SpendCategory.GROCERY,
    # Gas
    "5541": SpendCategory.GAS,
    "5542": SpendCategory.GAS,
    # Drugstore
    "5912": SpendCategory.DRUGSTORE,
    # Travel (airlines, hotels)
    "3000": SpendCategory.TRAVEL,
    "3001": SpendCategory.TRAVEL,
    "4511": SpendCategory.TRAVEL,
    "7011": SpendCategory.TRAVEL,
    # Entertainment
    "7832": SpendCategory.ENTERTAINMENT,
    "7922": SpendCategory.ENTERTAINMENT,
    "7941": SpendCategory.ENTERTAINMENT,
    # Transit
    "4111": SpendCategory.TRANSIT,
    "4121": SpendCategory.TRANSIT,
}

# Place-search type -> spending category
PLACE_TYPE_CATEGORY_MAP = {
    # Dining
    "restaurant": SpendCategory.DINING,
    "cafe": SpendCategory.DINING,
    "bakery": SpendCategory.DINING,
    "bar": SpendCategory.DINING,
    "coffee_shop": SpendCategory.DINING,
    "fast_food_restaurant": SpendCategory.DINING,
    "pizza_restaurant": SpendCategory.DINING,
    "steak_house": SpendCategory.DINING,
    "sushi_restaurant": SpendCategory.DINING,
    "ice_cream_shop": SpendCategory.DINING,
    "sandwich_shop": SpendCategory.DINING,
    # Grocery
    "supermarket": SpendCategory.GROCERY,
    "grocery_store": SpendCategory.GROCERY,
    "food_store": SpendCategory.GROCERY,
    # Gas
    "gas_station": SpendCategory.GAS,
    "ev_charging_station": SpendCategory.GAS,
    # Drugstore
    "pharmacy": SpendCategory.DRUGSTORE,
    "drugstore": SpendCategory.DRUGSTORE,
    # Travel
    "airport": SpendCategory.TRAVEL,
    "hotel": SpendCategory.TRAVEL,
    "lodging": SpendCategory.TRAVEL,
    "travel_agency": SpendCategory.TRAVEL,
    "car_rental": SpendCategory.TRAVEL,
    # Entertainment
    "movie_theater": SpendCategory.ENTERTAINMENT,
    "amusement_park": SpendCategory.ENTERTAINMENT,
    "bowling_alley": SpendCategory.ENTERTAINMENT,
    "casino": SpendCategory.ENTERTAINMENT,
    "night_club": SpendCategory.ENTERTAINMENT,
    # Transit
    "bus_station": SpendCategory.TRANSIT,
    "subway_station": SpendCategory.TRANSIT,
    "train_station": SpendCategory.TRANSIT,
    "taxi_stand": SpendCategory.TRANSIT,
    # Shopping
    "shopping_mall": SpendCategory.ONLINE_SHOPPING,
    "department_store": SpendCategory.ONLINE_SHOPPING,
    "clothing_store": SpendCategory.ONLINE_SHOPPING,
    "electronics_store": SpendCategory.ONLINE_SHOPPING,
}

# Representative MCC for merchants whose category came from place types
CATEGORY_TO_MCC = {
    SpendCategory.DINING: "5812",
    SpendCategory.GROCERY: "5411",
    SpendCategory.GAS: "5541",
    SpendCategory.DRUGSTORE: "5912",
    SpendCategory.TRAVEL: "4511",
    SpendCategory.ENTERTAINMENT: "7832",
    SpendCategory.STREAMING: "4899",
    SpendCategory.TRANSIT: "4121",
    SpendCategory.ONLINE_SHOPPING: "5999",
    SpendCategory.OTHER: "5999",
}

CATEGORY_DISPLAY_NAMES = {
    SpendCategory.DINING: "Dining",
    SpendCategory.GROCERY: "Grocery",
    SpendCategory.GAS: "Gas Station",
    SpendCategory.TRAVEL: "Travel",
    SpendCategory.DRUGSTORE: "Drugstore",
    SpendCategory.ENTERTAINMENT: "Entertainment",
    SpendCategory.STREAMING: "Streaming",
    SpendCategory.TRANSIT: "Transit",
    SpendCategory.ONLINE_SHOPPING: "Online Shopping",
    SpendCategory.OTHER: "Other",
}


def classify(code: str) -> SpendCategory:
    """
    Map a merchant category code to a spending category.

    Exact-match lookup; codes not in MCC_CATEGORY_MAP map to OTHER.

    Example:
        >>> classify("5812")
        <SpendCategory.DINING: 'dining'>
        >>> classify("9999")
        <SpendCategory.OTHER: 'other'>
    """
    return MCC_CATEGORY_MAP.get(code, SpendCategory.OTHER)


def classify_place_types(types: Iterable[str]) -> SpendCategory:
    """Return the category of the first recognized place type, else OTHER."""
    for place_type in types:
        category = PLACE_TYPE_CATEGORY_MAP.get(place_type)
        if category is not None:
            return category
    return SpendCategory.OTHER


def mcc_for_category(category: SpendCategory) -> str:
    return CATEGORY_TO_MCC.get(category, CATEGORY_TO_MCC[SpendCategory.OTHER])


def category_display_name(category: SpendCategory) -> str:
    return CATEGORY_DISPLAY_NAMES.get(category, category.value.replace("_", " ").title())


def merchant_from_mcc(
    merchant_id: str,
    name: str,
    mcc_code: str,
    address: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> Merchant:
    """Build a Merchant whose category is resolved from its MCC."""
    return Merchant(
        id=merchant_id,
        name=name,
        category=classify(mcc_code),
        mcc_code=mcc_code,
        address=address,
        latitude=latitude,
        longitude=longitude,
    )


def merchant_from_place(place: dict) -> Merchant:
    """
    Build a Merchant from a nearby-place search result.

    Args:
        place: dict with keys id, displayName.text, types and optionally
            formattedAddress and location.latitude/longitude

    Returns:
        Merchant with category from the place types and a representative MCC
    """
    category = classify_place_types(place.get("types") or [])
    location = place.get("location") or {}
    display_name = place.get("displayName") or {}
    return Merchant(
        id=place["id"],
        name=display_name.get("text", ""),
        category=category,
        mcc_code=mcc_for_category(category),
        address=place.get("formattedAddress"),
        latitude=location.get("latitude"),
        longitude=location.get("longitude"),
    )
