import math

import pytest

from agentcast.exceptions import PriceValidationError
from agentcast.services.price_range import PriceRangePreference, parse_price


@pytest.mark.parametrize(
    "value, expected",
    [
        ("450,000", 450000.0),
        ("$1,250,000", 1250000.0),
        (" 300000 ", 300000.0),
        (0, 0.0),
        ("", None),
        (None, None),
    ],
)
def test_parse_price_accepts_common_formats(value, expected):
    assert parse_price(value) == expected


@pytest.mark.parametrize(
    "value, message",
    [
        ("abc", "Must be a valid number"),
        ("-5", "Price cannot be negative"),
        (1_000_000_000, "Price is too high"),
        (float("nan"), "Must be a valid number"),
    ],
)
def test_parse_price_rejects_bad_input(value, message):
    with pytest.raises(PriceValidationError) as exc:
        parse_price(value, "min_price")
    assert exc.value.field == "min_price"
    assert exc.value.message == message


def test_min_greater_than_max_is_rejected():
    price = PriceRangePreference(max_price=500000)
    with pytest.raises(PriceValidationError) as exc:
        price.set_min_price(600000)
    assert exc.value.message == "Minimum price cannot be greater than maximum price"
    assert price.min_price is None


def test_setting_a_number_clears_the_override():
    price = PriceRangePreference(has_no_min=True, has_no_max=True)
    price.set_min_price("100000")
    price.set_max_price(200000)
    assert not price.has_no_min
    assert not price.has_no_max


def test_override_flag_wins_over_stored_number():
    price = PriceRangePreference(min_price=700000, max_price=900000, has_no_max=True)
    assert price.effective_min == 700000
    assert price.effective_max == math.inf
    price.set_no_min(True)
    assert price.effective_min == -math.inf


def test_order_check_skipped_while_override_set():
    price = PriceRangePreference(min_price=700000, has_no_max=True)
    price.set_max_price(None)
    price.max_price = 500000
    with pytest.raises(PriceValidationError):
        price.set_no_max(False)
    assert price.has_no_max


def test_update_is_all_or_nothing():
    price = PriceRangePreference(min_price=100000, max_price=200000)
    with pytest.raises(PriceValidationError):
        price.update(min_price=150000, max_price="oops", fields=frozenset({"min_price", "max_price"}))
    assert (price.min_price, price.max_price) == (100000, 200000)


def test_update_explicit_none_clears_bound():
    price = PriceRangePreference(min_price=100000, max_price=200000)
    price.update(max_price=None, fields=frozenset({"max_price"}))
    assert price.max_price is None
    assert price.min_price == 100000


def test_update_can_swap_bounds_in_one_call():
    price = PriceRangePreference(min_price=100000, max_price=200000)
    price.update(min_price=300000, max_price=400000, fields=frozenset({"min_price", "max_price"}))
    assert (price.min_price, price.max_price) == (300000, 400000)


@pytest.mark.parametrize(
    "preference, criteria, expected",
    [
        (PriceRangePreference(has_no_min=True, max_price=500000), (400000, 600000), True),
        (PriceRangePreference(min_price=700000, max_price=900000), (None, 600000), False),
        (PriceRangePreference(), (400000, 600000), True),
        (PriceRangePreference(min_price=600000), (400000, 600000), True),
        (PriceRangePreference(max_price=399999), (400000, None), False),
    ],
)
def test_overlaps(preference, criteria, expected):
    assert preference.overlaps(*criteria) is expected


def test_describe():
    assert PriceRangePreference().describe() == "Any price"
    assert PriceRangePreference(min_price=400000).describe() == "$400,000+"
    assert PriceRangePreference(max_price=500000).describe() == "Up to $500,000"
    assert PriceRangePreference(400000, 600000).describe() == "$400,000 - $600,000"
