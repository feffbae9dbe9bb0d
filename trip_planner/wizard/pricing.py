"""
Pricing rules for the booking wizard.

All amounts are in the catalog currency (VND by default). Rates for extras and
child tickets come from PricingSettings so deployments can adjust them without
code changes.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from trip_planner.config.settings import PricingSettings, get_settings


class HeightBand(str, Enum):
    """Child ticket category at attractions"""
    UNDER_1M = "<1m"
    FROM_1M_TO_1M3 = "1-1m3"
    OVER_1M3 = ">1m3"


def _rates(rates: Optional[PricingSettings]) -> PricingSettings:
    return rates if rates is not None else get_settings().pricing


def nights_between(check_in: date, check_out: date) -> int:
    """Nights billed for a stay; zero when the dates are out of order"""
    return max((check_out - check_in).days, 0)


def trip_day_count(start_date: date, end_date: date) -> int:
    """Calendar days in a trip, both ends inclusive"""
    return max((end_date - start_date).days + 1, 0)


def stay_cost(price_per_night: float, check_in: date, check_out: date) -> float:
    return float(price_per_night) * nights_between(check_in, check_out)


def lodging_cost(stays: Iterable[Tuple[float, date, date]]) -> float:
    """
    Total lodging price

    Args:
        stays: (price_per_night, check_in, check_out) per selected accommodation
    """
    return sum(stay_cost(price, check_in, check_out) for price, check_in, check_out in stays)


def child_ticket_fraction(band: HeightBand, rates: Optional[PricingSettings] = None) -> float:
    rates = _rates(rates)
    band = HeightBand(band)
    if band == HeightBand.UNDER_1M:
        return rates.child_under_1m_fraction
    if band == HeightBand.FROM_1M_TO_1M3:
        return rates.child_1m_to_1m3_fraction
    return rates.child_over_1m3_fraction


def attraction_ticket_price(
    price: Optional[float],
    adults: int,
    children_heights: Sequence[HeightBand] = (),
    rates: Optional[PricingSettings] = None,
) -> float:
    """
    Price of one attraction visit for a party.

    Adults pay full price; each child pays a fraction set by their height band.
    Free attractions (no price) cost nothing.
    """
    if not price:
        return 0.0
    price = float(price)
    children_total = sum(
        price * child_ticket_fraction(band, rates) for band in children_heights
    )
    return price * adults + children_total


@dataclass
class AdditionalServices:
    """Optional extras chosen at the confirmation step"""
    insurance: float = 0.0
    sim: float = 0.0
    guide: float = 0.0

    @property
    def total(self) -> float:
        return self.insurance + self.sim + self.guide


def additional_services_cost(
    adults: int,
    children: int,
    trip_days: int,
    insurance: bool = False,
    sim: bool = False,
    guide: bool = False,
    rates: Optional[PricingSettings] = None,
) -> AdditionalServices:
    """
    Price extras: insurance covers every traveller, SIM cards are for adults
    only, and the guide is billed per trip day.
    """
    rates = _rates(rates)
    return AdditionalServices(
        insurance=rates.insurance_per_person * (adults + children) if insurance else 0.0,
        sim=rates.sim_per_adult * adults if sim else 0.0,
        guide=rates.guide_per_day * trip_days if guide else 0.0,
    )


@dataclass
class PriceBreakdown:
    """Running totals accumulated across wizard steps"""
    transportation: float = 0.0
    accommodation: float = 0.0
    attractions: float = 0.0
    services: float = 0.0

    @property
    def base_price(self) -> float:
        """Transportation plus lodging"""
        return self.transportation + self.accommodation

    @property
    def total(self) -> float:
        return self.base_price + self.attractions + self.services
