import pytest
from sqlalchemy import func, select

from agentcast.exceptions import PriceValidationError
from agentcast.models import AgentCoverageArea, NotificationPreference
from agentcast.services.categories import NotificationCategory
from agentcast.services.preferences import NotificationPreferenceStore


async def test_get_creates_default_row_once(db, make_agent):
    agent = await make_agent(with_preferences=False)
    store = NotificationPreferenceStore(db)

    first = await store.get(agent.id)
    second = await store.get(agent.id)

    assert first.agent_id == second.agent_id == agent.id
    assert not any([first.buyer_need, first.sales_intel, first.renter_need, first.general_discussion])
    assert (first.min_price, first.max_price, first.has_no_min, first.has_no_max) == (None, None, False, False)
    count = await db.scalar(select(func.count()).select_from(NotificationPreference))
    assert count == 1


async def test_update_is_partial_and_idempotent(db, make_agent):
    agent = await make_agent(with_preferences=False)
    store = NotificationPreferenceStore(db)

    changes = {"buyer_need": True, "min_price": "450,000", "property_types": ["condo", "condo"]}
    await store.update(agent.id, changes)
    preference = await store.update(agent.id, changes)

    assert preference.buyer_need
    assert not preference.sales_intel
    assert preference.min_price == 450000
    assert preference.property_types == ["condo"]

    preference = await store.update(agent.id, {"sales_intel": True})
    assert preference.buyer_need and preference.sales_intel
    assert preference.min_price == 450000


async def test_price_error_leaves_row_untouched(db, make_agent):
    agent = await make_agent(buyer_need=True, min_price=100000, max_price=200000)
    store = NotificationPreferenceStore(db)

    with pytest.raises(PriceValidationError) as exc:
        await store.update(agent.id, {"buyer_need": False, "min_price": 300000})

    assert exc.value.field == "max_price"
    preference = await store.get(agent.id)
    assert preference.buyer_need
    assert preference.min_price == 100000


async def test_load_candidates_filters_category_and_sender(db, make_agent):
    sender = await make_agent("sender@example.com", renter_need=True)
    other = await make_agent("other@example.com", renter_need=True, max_price=3000)
    await make_agent("buyer@example.com", buyer_need=True)
    store = NotificationPreferenceStore(db)

    candidates = await store.load_candidates(NotificationCategory.RENTER_NEED, exclude_agent_id=sender.id)

    assert [record.agent_id for record in candidates] == [other.id]
    assert candidates[0].price_range.effective_max == 3000


async def test_replace_coverage_swaps_all_rows(db, make_agent):
    agent = await make_agent(coverage=[{"state": "CT", "city": "Hartford"}])
    store = NotificationPreferenceStore(db)

    areas = await store.replace_coverage(
        agent.id,
        [
            {"state": "MA", "county": "Suffolk", "city": "Boston", "neighborhood": "Back Bay"},
            {"state": "MA", "county": "Middlesex", "city": "Cambridge"},
        ],
    )

    assert [(area.state, area.city, area.neighborhood) for area in areas] == [
        ("MA", "Cambridge", None),
        ("MA", "Boston", "Back Bay"),
    ]
    records = await store.load_coverage([agent.id])
    assert {record.city for record in records} == {"Boston", "Cambridge"}

    assert await store.replace_coverage(agent.id, []) == []
    count = await db.scalar(select(func.count()).select_from(AgentCoverageArea))
    assert count == 0
