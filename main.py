"""
main.py
-------
Command line entry point for the LightBnB data layer.

Responsibilities:
    - Initialize the database connection pool (and schema on request).
    - Expose user lookup, reservation listing, property search and
      property creation as `lightbnb` subcommands.
"""

from functools import wraps

import click

from config import DEFAULT_RESULT_LIMIT
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from models.property import PropertySearchFilters
from services.property_service import PropertyService
from services.reservation_service import ReservationService
from services.user_service import UserService
from utils.logger import get_logger

logger = get_logger(__name__)


def with_database(func):
    """Open the connection pool around a command and report validation errors."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        init_pool()
        try:
            return func(*args, **kwargs)
        except ValueError as e:
            logger.warning(f"{func.__name__} rejected input: {e}")
            raise click.ClickException(str(e))
        finally:
            close_pool()
    return wrapper


@click.group()
def cli():
    """LightBnB property rental database tools."""


@cli.command("init-db")
@with_database
def init_db_command():
    """Create the LightBnB tables if they do not exist."""
    create_tables()
    click.echo("Database schema is ready.")


@cli.command("user")
@click.argument("email")
@with_database
def user_command(email):
    """Look up a user by EMAIL."""
    user = UserService().find_by_email(email)
    if user is None:
        click.echo(f"No user with email {email}.")
        return
    click.echo(str(user))


@cli.command("reservations")
@click.argument("guest_id", type=int)
@click.option("--limit", type=int, default=DEFAULT_RESULT_LIMIT, show_default=True)
@with_database
def reservations_command(guest_id, limit):
    """List past reservations for GUEST_ID."""
    click.echo(ReservationService().summary(guest_id, limit))


@cli.command("search")
@click.option("--city")
@click.option("--owner-id", type=int)
@click.option("--min-price", type=float, help="Minimum nightly price in dollars.")
@click.option("--max-price", type=float, help="Maximum nightly price in dollars.")
@click.option("--min-rating", type=float)
@click.option("--limit", type=int, default=DEFAULT_RESULT_LIMIT, show_default=True)
@with_database
def search_command(city, owner_id, min_price, max_price, min_rating, limit):
    """Search properties, cheapest first."""
    filters = PropertySearchFilters(
        city=city,
        owner_id=owner_id,
        minimum_price_per_night=min_price,
        maximum_price_per_night=max_price,
        minimum_rating=min_rating,
    )
    click.echo(PropertyService().search_summary(filters, limit))


@cli.command("add-property")
@click.option("--owner-id", type=int, required=True)
@click.option("--title", required=True)
@click.option("--city", required=True)
@click.option("--cost-per-night", type=float, default=0, help="Nightly price in dollars.")
@click.option("--description")
@click.option("--thumbnail-photo-url")
@click.option("--cover-photo-url")
@click.option("--street")
@click.option("--province")
@click.option("--post-code")
@click.option("--country")
@click.option("--parking-spaces", type=int, default=0)
@click.option("--number-of-bathrooms", type=int, default=0)
@click.option("--number-of-bedrooms", type=int, default=0)
@with_database
def add_property_command(**fields):
    """Create a new listing."""
    prop = PropertyService().create_listing(fields)
    click.echo(f"Created {PropertyService.format_listing(prop)}")


if __name__ == "__main__":
    cli()
