from typing import List, Optional

import typer

from shared.cli import fmt_price, print_products, run_async, validate
from .main import lifespan, product_app
from .schemas import ProductCreate, ProductUpdate
from .service import ProductService

NOT_FOUND = "⚠️  Product not found."


# CREATE: add a new product
@product_app.command("add")
def add_product(
    name: str = typer.Argument(..., help="Product name"),
    stock: int = typer.Argument(..., help="Stock quantity"),
    price: float = typer.Argument(..., help="Product price"),
    tags: Optional[List[str]] = typer.Option(None, "--tag", help="Tag (repeatable)"),
):
    """Add a new product"""
    data = validate(ProductCreate, name=name, stock=stock, price=price, tags=tags or [])

    async def _add():
        async with lifespan() as db:
            await ProductService.create_product(db, data)
        typer.echo(f"✅ Added: {name} ({stock} pcs at {fmt_price(price)})")

    run_async(_add)


# READ: list all products
@product_app.command("list")
def list_products():
    """List all products"""

    async def _list():
        async with lifespan() as db:
            products = await ProductService.list_products(db)
        print_products(products)

    run_async(_list)


@product_app.command("get")
def get_product(name: str = typer.Argument(..., help="Product name")):
    """Show one product by name"""

    async def _get():
        async with lifespan() as db:
            product = await ProductService.get_product(db, name)
        if product:
            typer.echo(f"🔍 Found: {product.model_dump_json()}")
        else:
            typer.echo(NOT_FOUND)

    run_async(_get)


# UPDATE: update an existing product by name
@product_app.command("update")
def update_product(
    old_name: str = typer.Argument(..., help="Current product name"),
    new_name: str = typer.Argument(..., help="New product name"),
    stock: int = typer.Argument(..., help="New stock quantity"),
    price: float = typer.Argument(..., help="New product price"),
):
    """Update product by name"""
    data = validate(ProductUpdate, new_name=new_name, stock=stock, price=price)

    async def _update():
        async with lifespan() as db:
            updated = await ProductService.update_product(db, old_name, data)
        if updated:
            typer.echo(f"🔁 Updated: {old_name} => {new_name} ({stock} pcs at {fmt_price(price)})")
        else:
            typer.echo(NOT_FOUND)

    run_async(_update)


# DELETE: remove a product
@product_app.command("delete")
def delete_product(name: str = typer.Argument(..., help="Product name")):
    """Delete product by name"""

    async def _delete():
        async with lifespan() as db:
            deleted = await ProductService.delete_product(db, name)
        typer.echo(f"🗑️  Deleted: {name}" if deleted else NOT_FOUND)

    run_async(_delete)
