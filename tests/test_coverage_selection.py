import pytest

from agentcast.services.coverage_selection import CoverageSelection, TownKey


@pytest.fixture
def selection(small_hierarchy):
    return CoverageSelection(state="MA", include_sub_areas=True, hierarchy=small_hierarchy)


def test_selecting_whole_town_removes_its_sub_areas(selection):
    selection.toggle_sub_area("Boston", "Back Bay")
    selection.toggle_sub_area("Boston", "South End")
    selection.toggle_sub_area("Dallas", "Uptown")

    selection.toggle_town("Boston")

    assert selection.towns == {TownKey("Boston"), TownKey("Dallas", "Uptown")}


def test_removing_town_removes_town_and_all_sub_areas(selection):
    selection.toggle_town("Boston")
    selection.toggle_sub_area("Boston", "Back Bay")
    selection.toggle_town("Chelsea")

    selection.toggle_town("Boston")

    assert selection.towns == {TownKey("Chelsea")}


def test_toggle_sub_area_twice_removes_it(selection):
    selection.toggle_sub_area("Boston", "Beacon Hill")
    selection.toggle_sub_area("Boston", "Beacon Hill")
    assert selection.towns == set()


def test_county_change_resets_towns(selection):
    selection.toggle_town("Boston")
    selection.select_county("middlesex county")
    assert selection.county == "Middlesex"
    assert selection.towns == set()


def test_state_change_resets_county_and_towns(selection):
    selection.select_county("Suffolk")
    selection.toggle_town("Boston")
    selection.select_state("Texas")
    assert (selection.state, selection.county, selection.towns) == ("TX", "all", set())


def test_select_all_uses_current_town_list_without_sub_areas(selection):
    selection.select_county("Suffolk")
    selection.toggle_sub_area("Boston", "Back Bay")

    selection.select_all()

    assert selection.towns == {TownKey("Boston"), TownKey("Chelsea")}


def test_clear_all_only_touches_current_town_list(selection):
    selection.toggle_town("Newton")
    selection.select_county("Suffolk")
    selection.toggle_town("Boston")
    selection.toggle_sub_area("Boston", "Back Bay")
    selection.towns.add(TownKey("Newton"))

    selection.clear_all()

    assert selection.towns == {TownKey("Newton")}


def test_add_manual_towns_normalizes_known_names(selection):
    added = selection.add_manual_towns("cambridge, Springfield , ,Cambridge")
    assert added == [TownKey("Cambridge"), TownKey("Springfield")]
    assert selection.is_selected("Cambridge")


def test_display_labels_use_en_dash_for_sub_areas(selection):
    selection.toggle_town("Chelsea")
    selection.toggle_sub_area("Boston", "Back Bay")
    assert selection.display_labels() == ["Boston – Back Bay", "Chelsea"]


def test_available_sub_areas_respects_flag(small_hierarchy):
    selection = CoverageSelection(state="MA", hierarchy=small_hierarchy)
    assert selection.available_sub_areas("Boston") == []
    selection.include_sub_areas = True
    assert selection.available_sub_areas("Boston") == ["Back Bay", "Beacon Hill", "South End"]


def test_to_coverage_rows(selection):
    selection.select_county("Suffolk")
    selection.toggle_town("Chelsea")
    selection.toggle_sub_area("Boston", "Back Bay")
    assert selection.to_coverage_rows() == [
        {"state": "MA", "county": "Suffolk", "city": "Boston", "neighborhood": "Back Bay"},
        {"state": "MA", "county": "Suffolk", "city": "Chelsea", "neighborhood": None},
    ]


@pytest.mark.parametrize(
    "raw, key",
    [
        ("Boston", TownKey("Boston")),
        ("Boston-Back Bay", TownKey("Boston", "Back Bay")),
        ("San Francisco-Haight-Ashbury", TownKey("San Francisco", "Haight-Ashbury")),
    ],
)
def test_legacy_keys(raw, key):
    assert TownKey.from_legacy(raw) == key
    assert key.to_legacy() == raw


def test_legacy_parse_keeps_known_hyphenated_town_whole():
    towns = {"Manchester-by-the-Sea", "Boston"}
    assert TownKey.from_legacy("Manchester-by-the-Sea", towns) == TownKey("Manchester-by-the-Sea")
    assert TownKey.from_legacy("Boston-Back Bay", towns) == TownKey("Boston", "Back Bay")


def test_from_keys_keeps_whole_town_over_sub_areas(small_hierarchy):
    selection = CoverageSelection.from_keys(
        "MA",
        [TownKey("Boston", "Back Bay"), TownKey("Boston"), TownKey("Chelsea")],
        hierarchy=small_hierarchy,
    )
    assert selection.towns == {TownKey("Boston"), TownKey("Chelsea")}
