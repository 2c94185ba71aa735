"""Notification categories and their lookup tables."""
import enum
from operator import attrgetter
from typing import Any, Callable


class NotificationCategory(str, enum.Enum):
    """Closed set of broadcast categories an agent can subscribe to."""

    BUYER_NEED = "buyer_need"
    SALES_INTEL = "sales_intel"
    RENTER_NEED = "renter_need"
    GENERAL_DISCUSSION = "general_discussion"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: dict[NotificationCategory, str] = {
    NotificationCategory.BUYER_NEED: "Buyer Need",
    NotificationCategory.SALES_INTEL: "Sales Intel",
    NotificationCategory.RENTER_NEED: "Renter Need",
    NotificationCategory.GENERAL_DISCUSSION: "General Discussion",
}

# Reads the subscription flag for a category off any preference-like object
CATEGORY_ACCESSORS: dict[NotificationCategory, Callable[[Any], bool]] = {
    NotificationCategory.BUYER_NEED: attrgetter("buyer_need"),
    NotificationCategory.SALES_INTEL: attrgetter("sales_intel"),
    NotificationCategory.RENTER_NEED: attrgetter("renter_need"),
    NotificationCategory.GENERAL_DISCUSSION: attrgetter("general_discussion"),
}


def is_subscribed(preference: Any, category: NotificationCategory) -> bool:
    return bool(CATEGORY_ACCESSORS[category](preference))


PROPERTY_TYPES: dict[str, str] = {
    "single_family": "Single Family",
    "condo": "Condominium",
    "townhouse": "Townhouse",
    "multi_family": "Multi-Family",
    "land": "Land",
    "commercial": "Commercial",
    "residential_rental": "Residential Rental",
    "commercial_rental": "Commercial Rental",
}
