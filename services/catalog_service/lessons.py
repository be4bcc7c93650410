"""
Step-by-step CRUD lessons against the products collection through the ODM.

Every step opens its own connection, runs a fixed sequence of queries and
exits. The steps are exposed both as `crud-cli catalog lesson <step>` and as
the `catalog-create`, `catalog-read`, `catalog-update` and `catalog-delete`
console scripts.
"""
import sys

import structlog
import typer
from pymongo.errors import BulkWriteError, DuplicateKeyError

from shared.cli import fmt_price, run_async
from shared.config.database import init_odm
from shared.observability import setup_observability
from .models import DOCUMENT_MODELS, Product
from .repository import ProductRepository

logger = structlog.get_logger(__name__)

SEED_PRODUCT = {"name": "T-Shirt", "price": 19.99, "stock": 50, "tags": ["clothing", "unisex"]}
SEED_BULK = [
    {"name": "Hoodie", "price": 34.99, "stock": 30, "tags": ["clothing", "winter"]},
    {"name": "Sneakers", "price": 59.99, "stock": 20, "tags": ["shoes", "sport"]},
    {"name": "Cap", "price": 14.99, "stock": 100, "tags": ["accessory", "summer"]},
]

READ_QUERIES = {
    "📦 All products": {},
    "🧢 Products with 'clothing' tag": {"tags": "clothing"},
    "📈 In-stock products": {"stock": {"$gt": 0}},
    "💰 Within price range $10 - $30": {"price": {"$gte": 10, "$lte": 30}},
}


async def seed_products() -> list[Product]:
    try:
        first = await ProductRepository.create_product(Product(**SEED_PRODUCT))
        rest = await ProductRepository.create_many([Product(**p) for p in SEED_BULK])
    except (DuplicateKeyError, BulkWriteError):
        raise ValueError("Products are already seeded, run the delete step first")
    logger.info("products_seeded", count=1 + len(rest))
    return [first, *rest]


async def read_products() -> dict[str, list[Product]]:
    return {title: await ProductRepository.find(query) for title, query in READ_QUERIES.items()}


async def update_products() -> None:
    await ProductRepository.update_one({"name": "T-Shirt"}, {"stock": 0})
    await ProductRepository.add_tag({"tags": "clothing"}, "sale")


async def delete_products(delete_all: bool = False) -> int:
    if delete_all:
        count = await ProductRepository.delete_many({})
        logger.warning("products_purged", count=count)
        return count
    count = await ProductRepository.delete_many({"name": "Cap"})
    count += await ProductRepository.delete_many({"stock": {"$lte": 0}})
    logger.info("products_deleted", count=count)
    return count


def _describe(product: Product) -> str:
    tags = ", ".join(product.tags)
    return f"  - {product.name}: {product.stock} pcs at {fmt_price(product.price)} [{tags}]"


lesson_app = typer.Typer(help="Seed, query, update and clean up the products collection")


@lesson_app.callback()
def startup():
    setup_observability("catalog_lessons")


@lesson_app.command("create")
def create_step():
    """Insert one product, then bulk insert three more"""

    async def _create():
        async with init_odm(DOCUMENT_MODELS):
            await seed_products()
        typer.echo("✅ Seeding complete")

    run_async(_create)


@lesson_app.command("read")
def read_step():
    """Run the sample queries"""

    async def _read():
        async with init_odm(DOCUMENT_MODELS):
            results = await read_products()
        for title, products in results.items():
            typer.echo(f"{title}:")
            for p in products:
                typer.echo(_describe(p))

    run_async(_read)


@lesson_app.command("update")
def update_step():
    """Zero the T-Shirt stock and tag clothing as on sale"""

    async def _update():
        async with init_odm(DOCUMENT_MODELS):
            await update_products()
        typer.echo("🔄 T-Shirt stock updated")
        typer.echo('🏷️  Added "sale" tag to all clothing items')

    run_async(_update)


@lesson_app.command("delete")
def delete_step(
    delete_all: bool = typer.Option(False, "--all", help="Delete every product"),
):
    """Delete the Cap and every out-of-stock product"""

    async def _delete():
        async with init_odm(DOCUMENT_MODELS):
            await delete_products(delete_all)
        if delete_all:
            typer.echo("⚠️  Deleted ALL products")
        else:
            typer.echo("🗑️  Deleted product: Cap")
            typer.echo("🧹 Deleted all out-of-stock products")

    run_async(_delete)


def _alias(step: str):
    def entry():
        lesson_app(args=[step, *sys.argv[1:]], prog_name=f"catalog-{step}")

    return entry


create = _alias("create")
read = _alias("read")
update = _alias("update")
delete = _alias("delete")
