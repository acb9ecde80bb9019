"""
services/property_service.py
-----------------------------
Business logic for searching and creating listings.
Validates filters and listing data before they reach the PropertyRepository.
"""

import math
from typing import Mapping

from config import DEFAULT_RESULT_LIMIT
from models.property import Property, PropertySearchFilters
from repositories.property_repo import PropertyRepository, dollars_to_cents
from utils.logger import get_logger

logger = get_logger(__name__)

_REQUIRED_FIELDS = ("owner_id", "title", "city")
_COUNT_FIELDS = ("parking_spaces", "number_of_bathrooms", "number_of_bedrooms")
_TEXT_FIELDS = (
    "description", "thumbnail_photo_url", "cover_photo_url",
    "street", "province", "post_code", "country",
)


class PropertyService:
    """Handles listing search and creation."""

    def __init__(self):
        self.repo = PropertyRepository()

    # ── SEARCH ────────────────────────────────────────────

    def search(self, filters: PropertySearchFilters | None = None,
               limit: int = DEFAULT_RESULT_LIMIT) -> list[Property]:
        """
        Search listings after validating the filters.

        Raises:
            ValueError: On a non-positive limit, negative prices, an
                inverted price range, or a rating outside 0..5.
        """
        filters = filters or PropertySearchFilters()
        self.validate_filters(filters)
        if filters.is_empty():
            logger.info(f"Unfiltered property search, limit {limit}")
        if limit <= 0:
            raise ValueError("Limit must be a positive number.")
        return self.repo.search(filters, limit)

    @staticmethod
    def validate_filters(filters: PropertySearchFilters) -> None:
        low = filters.minimum_price_per_night
        high = filters.maximum_price_per_night
        for value in (low, high, filters.minimum_rating):
            if value is not None and not math.isfinite(value):
                raise ValueError(f"Filter values must be finite numbers, got {value}.")
        if (low is not None and low < 0) or (high is not None and high < 0):
            raise ValueError("Prices cannot be negative.")
        if low is not None and high is not None and low > high:
            raise ValueError("Minimum price is greater than maximum price.")
        if filters.minimum_rating is not None and not 0 <= filters.minimum_rating <= 5:
            raise ValueError("Minimum rating must be between 0 and 5.")

    # ── CREATE ────────────────────────────────────────────

    def create_listing(self, data: Mapping[str, object]) -> Property:
        """
        Create a listing from submitted form data.

        Args:
            data: Field values; `cost_per_night` is in dollars.

        Returns:
            The saved Property (cost_per_night in cents).

        Raises:
            ValueError: If a required field is missing or a number is invalid.
        """
        missing = [f for f in _REQUIRED_FIELDS if data.get(f) is None or not str(data.get(f)).strip()]
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        try:
            price = float(data.get("cost_per_night") or 0)
            counts = {f: int(data.get(f) or 0) for f in _COUNT_FIELDS}
            owner_id = int(data["owner_id"])
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid listing data: {e}")
            raise ValueError(f"Invalid numeric value in listing: {e}")

        if not math.isfinite(price):
            raise ValueError(f"Price must be a finite number, got {price}.")
        if price < 0 or any(v < 0 for v in counts.values()):
            raise ValueError("Price and room counts cannot be negative.")

        prop = Property(
            owner_id=owner_id,
            title=str(data["title"]).strip(),
            city=str(data["city"]).strip(),
            cost_per_night=dollars_to_cents(price),
            **{f: data.get(f) or None for f in _TEXT_FIELDS},
            **counts,
        )
        return self.repo.add(prop)

    @staticmethod
    def format_listing(prop: Property) -> str:
        rooms = f"{prop.number_of_bedrooms} bed / {prop.number_of_bathrooms} bath"
        return f"{prop} | {rooms} | parking {prop.parking_spaces}"

    def search_summary(self, filters: PropertySearchFilters | None = None,
                       limit: int = DEFAULT_RESULT_LIMIT) -> str:
        """Get a printable list of matching listings."""
        results = self.search(filters, limit)
        if not results:
            return "No properties match your search."
        lines = [f"Found {len(results)} properties:"]
        lines.extend(f"  {self.format_listing(p)}" for p in results)
        return "\n".join(lines)
