import pytest

from agentcast.services.categories import PROPERTY_TYPES, NotificationCategory, is_subscribed
from agentcast.services.preferences import PreferenceRecord


@pytest.mark.parametrize("category", list(NotificationCategory))
def test_each_category_reads_its_own_flag(category):
    record = PreferenceRecord(agent_id=None, **{category.value: True})
    assert is_subscribed(record, category)
    others = [other for other in NotificationCategory if other is not category]
    assert not any(is_subscribed(record, other) for other in others)


def test_category_labels():
    assert NotificationCategory.SALES_INTEL.label == "Sales Intel"
    assert NotificationCategory("general_discussion").label == "General Discussion"


def test_property_types_include_rentals():
    assert PROPERTY_TYPES["residential_rental"] == "Residential Rental"
    assert len(PROPERTY_TYPES) == 8
