"""
models/property.py
------------------
Domain model for rental listings and the filters used to search them.
"""

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class Property:
    """
    A rental listing.

    Attributes:
        owner_id: The user who lists the property.
        title: Listing headline.
        description: Free text description.
        thumbnail_photo_url: Small image for result lists.
        cover_photo_url: Large image for the listing page.
        cost_per_night: Nightly price in cents.
        street, city, province, post_code, country: Address fields.
        parking_spaces: Number of parking spots.
        number_of_bathrooms: Bathroom count.
        number_of_bedrooms: Bedroom count.
        active: Whether the listing is bookable.
        id: Database primary key (None for new records).
        average_rating: Mean review rating, filled by search queries only.
    """
    owner_id: int
    title: str
    description: Optional[str]
    thumbnail_photo_url: Optional[str]
    cover_photo_url: Optional[str]
    cost_per_night: int
    street: Optional[str]
    city: Optional[str]
    province: Optional[str]
    post_code: Optional[str]
    country: Optional[str]
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @property
    def nightly_price(self) -> float:
        """Price per night in dollars."""
        return self.cost_per_night / 100

    def __str__(self) -> str:
        rating = f"{self.average_rating:.1f}" if self.average_rating is not None else "-"
        return f"#{self.id} {self.title} | {self.city} | ${self.nightly_price:.2f}/night | rating {rating}"


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass
class PropertySearchFilters:
    """
    Optional criteria for a property search. Prices are in dollars.
    Unset (None) fields do not constrain the search.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = None
    maximum_price_per_night: Optional[float] = None
    minimum_rating: Optional[float] = None

    @classmethod
    def from_query(cls, params: Mapping[str, object]) -> "PropertySearchFilters":
        """
        Build filters from string-valued request parameters.

        Blank values are treated as missing. Raises ValueError when a
        numeric field cannot be parsed.
        """
        def number(key, cast):
            value = params.get(key)
            if _blank(value):
                return None
            try:
                return cast(str(value).strip())
            except ValueError:
                raise ValueError(f"Invalid value for {key}: {value!r}")

        city = params.get("city")
        return cls(
            city=None if _blank(city) else str(city).strip(),
            owner_id=number("owner_id", int),
            minimum_price_per_night=number("minimum_price_per_night", float),
            maximum_price_per_night=number("maximum_price_per_night", float),
            minimum_rating=number("minimum_rating", float),
        )

    def is_empty(self) -> bool:
        return all(
            getattr(self, name) is None
            for name in ("city", "owner_id", "minimum_price_per_night",
                         "maximum_price_per_night", "minimum_rating")
        )
