"""Price range preference value object and validation."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from agentcast.exceptions import PriceValidationError

DEFAULT_MAX_PRICE = 999_999_999

PriceInput = Union[str, int, float, None]


def parse_price(value: PriceInput, field: str = "price", max_price: float = DEFAULT_MAX_PRICE) -> Optional[float]:
    """Parse a user supplied price.

    Accepts numbers or strings such as "450,000" or "$450000". Blank input
    means "no value". Raises PriceValidationError for malformed, negative or
    out of range values.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise PriceValidationError(field, "Must be a valid number")
    if isinstance(value, str):
        cleaned = value.strip().replace(",", "").lstrip("$").strip()
        if cleaned == "":
            return None
        try:
            number = float(cleaned)
        except ValueError:
            raise PriceValidationError(field, "Must be a valid number")
    else:
        number = float(value)

    if math.isnan(number) or math.isinf(number):
        raise PriceValidationError(field, "Must be a valid number")
    if number < 0:
        raise PriceValidationError(field, "Price cannot be negative")
    if number > max_price:
        raise PriceValidationError(field, "Price is too high")
    return number


def intervals_overlap(low_a: float, high_a: float, low_b: float, high_b: float) -> bool:
    """True unless one interval lies entirely above or below the other."""
    return low_a <= high_b and high_a >= low_b


@dataclass
class PriceRangePreference:
    """An agent's acceptable price interval.

    ``has_no_min`` / ``has_no_max`` take precedence over the stored numeric
    bound. Mutate through the setters so the invariants hold.
    """

    min_price: Optional[float] = None
    max_price: Optional[float] = None
    has_no_min: bool = False
    has_no_max: bool = False
    max_allowed: float = DEFAULT_MAX_PRICE

    def set_min_price(self, value: PriceInput) -> None:
        number = parse_price(value, "min_price", self.max_allowed)
        self.check_order(number, self.max_price, False, self.has_no_max)
        self.min_price = number
        if number is not None:
            self.has_no_min = False

    def set_max_price(self, value: PriceInput) -> None:
        number = parse_price(value, "max_price", self.max_allowed)
        self.check_order(self.min_price, number, self.has_no_min, False)
        self.max_price = number
        if number is not None:
            self.has_no_max = False

    def set_no_min(self, flag: bool) -> None:
        if not flag:
            self.check_order(self.min_price, self.max_price, False, self.has_no_max)
        self.has_no_min = flag

    def set_no_max(self, flag: bool) -> None:
        if not flag:
            self.check_order(self.min_price, self.max_price, self.has_no_min, False)
        self.has_no_max = flag

    def update(
        self,
        *,
        min_price: PriceInput = None,
        max_price: PriceInput = None,
        has_no_min: Optional[bool] = None,
        has_no_max: Optional[bool] = None,
        fields: frozenset[str] = frozenset(),
    ) -> None:
        """Apply several changes at once; all-or-nothing.

        ``fields`` names which of the keyword arguments were actually supplied
        so an explicit ``None`` clears a bound.
        """
        candidate = PriceRangePreference(
            self.min_price, self.max_price, self.has_no_min, self.has_no_max, self.max_allowed
        )
        # Override flags first so an explicit bound in the same update wins
        if "has_no_min" in fields and has_no_min is not None:
            candidate.has_no_min = has_no_min
        if "has_no_max" in fields and has_no_max is not None:
            candidate.has_no_max = has_no_max
        if "min_price" in fields:
            candidate.min_price = parse_price(min_price, "min_price", self.max_allowed)
            if candidate.min_price is not None:
                candidate.has_no_min = False
        if "max_price" in fields:
            candidate.max_price = parse_price(max_price, "max_price", self.max_allowed)
            if candidate.max_price is not None:
                candidate.has_no_max = False
        candidate.check_order(
            candidate.min_price, candidate.max_price, candidate.has_no_min, candidate.has_no_max
        )

        self.min_price = candidate.min_price
        self.max_price = candidate.max_price
        self.has_no_min = candidate.has_no_min
        self.has_no_max = candidate.has_no_max

    @staticmethod
    def check_order(
        min_price: Optional[float],
        max_price: Optional[float],
        has_no_min: bool,
        has_no_max: bool,
    ) -> None:
        if has_no_min or has_no_max or min_price is None or max_price is None:
            return
        if min_price > max_price:
            raise PriceValidationError(
                "max_price", "Minimum price cannot be greater than maximum price"
            )

    @property
    def effective_min(self) -> float:
        if self.has_no_min:
            return -math.inf
        return self.min_price if self.min_price is not None else 0.0

    @property
    def effective_max(self) -> float:
        if self.has_no_max:
            return math.inf
        return self.max_price if self.max_price is not None else math.inf

    def overlaps(self, criteria_min: Optional[float], criteria_max: Optional[float]) -> bool:
        """Whether this preference intersects a broadcast's price interval."""
        low = criteria_min if criteria_min is not None else 0.0
        high = criteria_max if criteria_max is not None else math.inf
        return intervals_overlap(self.effective_min, self.effective_max, low, high)

    def describe(self) -> str:
        if self.effective_min in (-math.inf, 0.0) and self.effective_max == math.inf:
            return "Any price"
        if self.effective_max == math.inf:
            return f"${self.effective_min:,.0f}+"
        if self.effective_min in (-math.inf, 0.0):
            return f"Up to ${self.effective_max:,.0f}"
        return f"${self.effective_min:,.0f} - ${self.effective_max:,.0f}"
