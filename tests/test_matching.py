import uuid

from agentcast.services.categories import NotificationCategory
from agentcast.services.matching import BroadcastCriteria, MatchingService, match_recipients
from agentcast.services.preferences import CoverageRecord, PreferenceRecord

BUYER = NotificationCategory.BUYER_NEED


def _agent_ids(count):
    return [uuid.uuid4() for _ in range(count)]


def test_category_match_excludes_sender():
    sender, first, second = _agent_ids(3)
    preferences = [PreferenceRecord(agent_id, buyer_need=True) for agent_id in (sender, first, second)]

    recipients = match_recipients(BroadcastCriteria(BUYER), preferences, sender_id=sender)

    assert recipients == {first, second}


def test_category_flag_must_be_set():
    buyer, renter = _agent_ids(2)
    preferences = [PreferenceRecord(buyer, buyer_need=True), PreferenceRecord(renter, renter_need=True)]
    criteria = BroadcastCriteria(NotificationCategory.RENTER_NEED)
    assert match_recipients(criteria, preferences) == {renter}


def test_open_ended_preference_overlaps_criteria_range():
    agent = uuid.uuid4()
    preferences = [PreferenceRecord(agent, buyer_need=True, has_no_min=True, max_price=500000)]
    criteria = BroadcastCriteria(BUYER, min_price=400000, max_price=600000)
    assert match_recipients(criteria, preferences) == {agent}


def test_disjoint_price_range_is_excluded():
    agent = uuid.uuid4()
    preferences = [PreferenceRecord(agent, buyer_need=True, min_price=700000, max_price=900000)]
    criteria = BroadcastCriteria(BUYER, max_price=600000)
    assert match_recipients(criteria, preferences) == set()


def test_agent_without_price_data_is_unrestricted():
    agent = uuid.uuid4()
    preferences = [PreferenceRecord(agent, buyer_need=True)]
    criteria = BroadcastCriteria(BUYER, min_price=2_000_000)
    assert match_recipients(criteria, preferences) == {agent}


def test_state_mismatch_excludes_agent():
    agent = uuid.uuid4()
    preferences = [PreferenceRecord(agent, buyer_need=True)]
    coverage = [CoverageRecord(agent, "CT", city="Hartford")]
    assert match_recipients(BroadcastCriteria(BUYER, state="MA"), preferences, coverage) == set()


def test_agent_without_coverage_is_excluded_when_geography_given():
    agent = uuid.uuid4()
    preferences = [PreferenceRecord(agent, buyer_need=True)]
    assert match_recipients(BroadcastCriteria(BUYER, state="MA"), preferences, []) == set()


def test_city_and_county_filters(small_hierarchy):
    boston, cambridge, statewide, norfolk = _agent_ids(4)
    preferences = [PreferenceRecord(agent_id, buyer_need=True) for agent_id in (boston, cambridge, statewide, norfolk)]
    coverage = [
        CoverageRecord(boston, "MA", "Suffolk", "Boston", "Back Bay"),
        CoverageRecord(cambridge, "Massachusetts", None, "cambridge"),
        CoverageRecord(statewide, "MA"),
        CoverageRecord(norfolk, "MA", "Norfolk"),
    ]

    by_city = BroadcastCriteria(BUYER, state="MA", cities=("Cambridge",))
    assert match_recipients(by_city, preferences, coverage, hierarchy=small_hierarchy) == {cambridge, statewide}

    by_county = BroadcastCriteria(BUYER, state="ma", counties=("Middlesex County",))
    assert match_recipients(by_county, preferences, coverage, hierarchy=small_hierarchy) == {cambridge, statewide}

    # Newton sits in Norfolk, so the county-wide row covers it
    newton = BroadcastCriteria(BUYER, state="MA", cities=("Newton",))
    assert match_recipients(newton, preferences, coverage, hierarchy=small_hierarchy) == {statewide, norfolk}


def test_property_types_stage():
    condo_only, anything, land_only = _agent_ids(3)
    preferences = [
        PreferenceRecord(condo_only, buyer_need=True, property_types=("condo",)),
        PreferenceRecord(anything, buyer_need=True),
        PreferenceRecord(land_only, buyer_need=True, property_types=("land",)),
    ]
    criteria = BroadcastCriteria(BUYER, property_types=("condo", "townhouse"))
    assert match_recipients(criteria, preferences) == {condo_only, anything}


def test_summary_lines():
    criteria = BroadcastCriteria(
        BUYER,
        state="MA",
        cities=("Boston", "Cambridge"),
        min_price=400000,
        max_price=600000,
        property_types=("condo",),
    )
    assert criteria.summary_lines() == [
        "State: MA",
        "Cities: Boston, Cambridge",
        "Price range: $400,000 - $600,000",
        "Property types: Condominium",
    ]


async def test_matching_service_reads_store(db, make_agent):
    sender = await make_agent("sender@example.com", buyer_need=True)
    near = await make_agent(
        "near@example.com",
        buyer_need=True,
        coverage=[{"state": "MA", "county": "Suffolk", "city": "Boston"}],
    )
    await make_agent(
        "far@example.com",
        buyer_need=True,
        coverage=[{"state": "CT", "city": "Hartford"}],
    )
    await make_agent("unsubscribed@example.com", sales_intel=True, coverage=[{"state": "MA"}])

    service = MatchingService(db)
    recipients = await service.find_recipients(BroadcastCriteria(BUYER, state="MA"), sender_id=sender.id)
    assert recipients == {near.id}
