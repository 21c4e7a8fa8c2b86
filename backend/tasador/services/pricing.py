import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from tasador.core.errors import (
    InvalidReferencePriceError,
    MissingFieldsError,
    NoClosestListingError,
    NoComparableListingsError,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("marca", "modelo", "año", "kilometros", "combustible")

MILEAGE_STEP_KM = 10_000
MILEAGE_STEP_DISCOUNT = 0.01

FUEL_ADJUSTMENTS: Dict[str, float] = {
    "diesel": -0.05,
    "gasolina": 0.03,
    "gasoline": 0.03,
    "eléctrico": 0.05,
    "electrico": 0.05,
    "electric": 0.05,
    "híbrido": 0.02,
    "hibrido": 0.02,
    "hybrid": 0.02,
}


@dataclass
class Appraisal:
    price: int
    reference: Mapping


def parse_price(text) -> Optional[float]:
    """Parse display prices like "12.000€" or "9.500,50 €" (comma is the decimal mark)."""
    if isinstance(text, (int, float)):
        return float(text)
    cleaned = re.sub(r"[^\d,]", "", str(text or "")).replace(",", ".", 1)
    # Only the leading number counts: "1,234,50" reads as 1.234.
    match = re.match(r"\d*\.?\d+", cleaned)
    return float(match.group(0)) if match else None


def parse_mileage(text) -> Optional[int]:
    if isinstance(text, (int, float)):
        return int(text)
    digits = re.sub(r"\D", "", str(text or ""))
    return int(digits) if digits else None


def parse_year(value) -> Optional[int]:
    if isinstance(value, (int, float)):
        return int(value)
    match = re.match(r"\s*(\d+)", str(value or ""))
    return int(match.group(1)) if match else None


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_request(payload: Mapping) -> None:
    missing = [field for field in REQUIRED_FIELDS if _is_missing(payload.get(field))]
    if missing:
        logger.info("Appraisal request missing fields: %s", ", ".join(missing))
        raise MissingFieldsError()


def _same(left, right: str) -> bool:
    return str(left or "").lower() == right.lower()


def find_comparables(
    listings: Iterable[Mapping], brand: str, model: str, fuel: str
) -> List[Mapping]:
    return [
        listing
        for listing in listings
        if _same(listing.get("marca"), brand)
        and _same(listing.get("modelo"), model)
        and _same(listing.get("combustible"), fuel)
    ]


def _distance(value: Optional[int], target: float) -> float:
    return math.inf if value is None else abs(value - target)


def find_closest_listing(listings: Iterable[Mapping], year: float, mileage: float) -> Optional[Mapping]:
    """Linear scan keeping the first listing unless a later one is closer in both year and mileage."""
    closest: Optional[Mapping] = None
    best_year_diff = best_km_diff = math.inf
    for listing in listings:
        year_diff = _distance(parse_year(listing.get("año")), year)
        km_diff = _distance(parse_mileage(listing.get("kilometros")), mileage)
        if closest is None or (year_diff < best_year_diff and km_diff < best_km_diff):
            closest = listing
            best_year_diff, best_km_diff = year_diff, km_diff
    return closest


def adjust_price(base_price: float, mileage: float, reference_mileage: Optional[int], fuel: str) -> int:
    price = base_price
    if reference_mileage is not None:
        steps = math.floor(abs(mileage - reference_mileage) / MILEAGE_STEP_KM)
        price -= steps * MILEAGE_STEP_DISCOUNT * base_price
    price += FUEL_ADJUSTMENTS.get(fuel.lower(), 0.0) * base_price
    price = max(price, 0.0)
    return int(math.floor(price + 0.5))


def appraise(listings: Iterable[Mapping], payload: Mapping) -> Appraisal:
    validate_request(payload)
    brand, model, fuel = str(payload["marca"]), str(payload["modelo"]), str(payload["combustible"])
    year, mileage = float(payload["año"]), float(payload["kilometros"])

    comparables = find_comparables(listings, brand, model, fuel)
    if not comparables:
        logger.info("No comparable listings for %s %s (%s)", brand, model, fuel)
        raise NoComparableListingsError()

    reference = find_closest_listing(comparables, year, mileage)
    if reference is None:
        raise NoClosestListingError()

    base_price = parse_price(reference.get("precio"))
    if base_price is None:
        logger.warning("Reference listing %s has unparseable price %r", reference.get("name"), reference.get("precio"))
        raise InvalidReferencePriceError()

    reference_mileage = parse_mileage(reference.get("kilometros"))
    price = adjust_price(base_price, mileage, reference_mileage, fuel)
    logger.debug("Appraised %s %s at %s using %s", brand, model, price, reference.get("name"))
    return Appraisal(price=price, reference=reference)
