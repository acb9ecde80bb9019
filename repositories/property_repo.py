"""
repositories/property_repo.py
------------------------------
Data access layer for rental listings.
Holds the dynamic search query builder and the insert statement.
"""

from typing import Optional

from config import DEFAULT_RESULT_LIMIT
from db.connection import get_connection, release_connection
from models.property import Property, PropertySearchFilters
from utils.logger import get_logger

logger = get_logger(__name__)

# Column order shared by every SELECT and by _row_to_property.
PROPERTY_COLUMNS = (
    "id", "owner_id", "title", "description", "thumbnail_photo_url",
    "cover_photo_url", "cost_per_night", "street", "city", "province",
    "post_code", "country", "parking_spaces", "number_of_bathrooms",
    "number_of_bedrooms", "active",
)

_SELECT_COLUMNS = ", ".join(f"properties.{c}" for c in PROPERTY_COLUMNS)


def dollars_to_cents(amount: float) -> int:
    """Convert a dollar amount to the integer cents stored in cost_per_night."""
    return int(round(amount * 100))


def build_search_query(
    filters: Optional[PropertySearchFilters] = None,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> tuple[str, list]:
    """
    Build the property search statement and its positional parameters.

    WHERE conditions are appended in a fixed order (city, owner, minimum
    price, maximum price); the first one opens the WHERE clause. The rating
    filter applies to the aggregate and goes into HAVING. The limit is
    always the last parameter.

    Args:
        filters: Search criteria, None for no filtering.
        limit: Maximum number of rows.

    Returns:
        (sql, params) ready for cursor.execute().
    """
    filters = filters or PropertySearchFilters()
    params: list = []
    conditions: list[str] = []

    sql = f"""
        SELECT {_SELECT_COLUMNS}, AVG(property_reviews.rating) AS average_rating
        FROM properties
        LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
    """

    if filters.city:
        params.append(f"%{filters.city}%")
        conditions.append("properties.city ILIKE %s")

    if filters.owner_id is not None:
        params.append(filters.owner_id)
        conditions.append("properties.owner_id = %s")

    if filters.minimum_price_per_night is not None:
        params.append(dollars_to_cents(filters.minimum_price_per_night))
        conditions.append("properties.cost_per_night >= %s")

    if filters.maximum_price_per_night is not None:
        params.append(dollars_to_cents(filters.maximum_price_per_night))
        conditions.append("properties.cost_per_night <= %s")

    if conditions:
        sql += "WHERE " + " AND ".join(conditions) + "\n"

    sql += "GROUP BY properties.id\n"

    # A zero rating matches everything, including listings without reviews.
    if filters.minimum_rating:
        params.append(filters.minimum_rating)
        sql += "HAVING AVG(property_reviews.rating) >= %s\n"

    params.append(limit)
    sql += "ORDER BY properties.cost_per_night\nLIMIT %s;"

    logger.debug(f"Property search query: {sql} params={params}")
    return sql, params


class PropertyRepository:
    """Repository for searches and inserts on the properties table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Property:
        """
        Insert a new listing.

        Args:
            prop: The Property to persist (cost_per_night in cents).

        Returns:
            The same Property with its `id` populated.
        """
        sql = """
            INSERT INTO properties (
                owner_id, title, description, thumbnail_photo_url, cover_photo_url,
                cost_per_night, street, city, province, post_code, country,
                parking_spaces, number_of_bathrooms, number_of_bedrooms
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING id;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    prop.owner_id, prop.title, prop.description,
                    prop.thumbnail_photo_url, prop.cover_photo_url,
                    prop.cost_per_night, prop.street, prop.city, prop.province,
                    prop.post_code, prop.country, prop.parking_spaces,
                    prop.number_of_bathrooms, prop.number_of_bedrooms,
                ))
                prop.id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Added property #{prop.id} for owner {prop.owner_id}")
            return prop
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add property '{prop.title}': {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, property_id: int) -> Optional[Property]:
        """Fetch a single listing with its average rating, or None."""
        sql = f"""
            SELECT {_SELECT_COLUMNS}, AVG(property_reviews.rating) AS average_rating
            FROM properties
            LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE properties.id = %s
            GROUP BY properties.id;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (property_id,))
                row = cur.fetchone()
                return row_to_property(row) if row else None
        finally:
            release_connection(conn)

    def search(
        self,
        filters: Optional[PropertySearchFilters] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """
        Find listings matching the filters, cheapest first.

        Returns:
            List of Property objects with `average_rating` set
            (None for listings without reviews).
        """
        sql, params = build_search_query(filters, limit)
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return [row_to_property(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)


def row_to_property(row: tuple, offset: int = 0) -> Property:
    """
    Convert a row holding PROPERTY_COLUMNS followed by average_rating,
    starting at `offset`, to a Property.
    """
    values = dict(zip(PROPERTY_COLUMNS, row[offset:offset + len(PROPERTY_COLUMNS)]))
    rating = row[offset + len(PROPERTY_COLUMNS)]
    return Property(
        **values,
        average_rating=float(rating) if rating is not None else None,
    )
