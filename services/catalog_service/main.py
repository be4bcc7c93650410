from contextlib import asynccontextmanager

import typer

from shared.config.database import init_odm
from shared.observability import setup_observability
from .lessons import lesson_app
from .models import DOCUMENT_MODELS

catalog_app = typer.Typer(
    name="catalog",
    help="Product and book CRUD through the beanie schema mapper",
    no_args_is_help=True,
)
book_app = typer.Typer(help="Book documents", no_args_is_help=True)

catalog_app.add_typer(book_app, name="books")
catalog_app.add_typer(lesson_app, name="lesson")


@catalog_app.callback()
def startup():
    # --- OBSERVABILITY BOOTSTRAP ---
    setup_observability("catalog_service")


@asynccontextmanager
async def lifespan():
    # Registers the documents and builds their indexes
    async with init_odm(DOCUMENT_MODELS) as db:
        yield db


from . import commands  # noqa: E402,F401  registers the commands on catalog_app
