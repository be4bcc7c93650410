from contextlib import asynccontextmanager

import typer

from shared.config.database import get_db
from shared.observability import setup_observability
from .repository import ProductRepository

product_app = typer.Typer(
    name="products",
    help="Product CRUD with the native MongoDB driver",
    no_args_is_help=True,
)


@product_app.callback()
def startup():
    # --- OBSERVABILITY BOOTSTRAP ---
    setup_observability("product_service")


@asynccontextmanager
async def lifespan():
    async with get_db() as db:
        # Unique product names are enforced by the database
        await ProductRepository.ensure_indexes(db)
        yield db


from . import commands  # noqa: E402,F401  registers the commands on product_app
