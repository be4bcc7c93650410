from typing import List, Optional

import typer

from shared.cli import fmt_price, print_products, run_async, validate
from .main import book_app, catalog_app, lifespan
from .schemas import BookCreate, ProductCreate, ProductUpdate
from .service import BookService, CatalogService

NOT_FOUND = "⚠️  Product not found."


@catalog_app.command("add")
def add_product(
    name: str = typer.Argument(..., help="Product name"),
    stock: int = typer.Argument(..., help="Stock quantity"),
    price: float = typer.Argument(..., help="Price"),
    tags: Optional[List[str]] = typer.Option(None, "--tag", help="Tag (repeatable)"),
):
    """Add a new product"""
    data = validate(ProductCreate, name=name, stock=stock, price=price, tags=tags or [])

    async def _add():
        async with lifespan():
            await CatalogService.add_product(data)
        typer.echo(f"✅ Added: {name} ({stock} pcs at {fmt_price(price)})")

    run_async(_add)


@catalog_app.command("list")
def list_products():
    """List all products"""

    async def _list():
        async with lifespan():
            products = await CatalogService.list_products()
        print_products(products)

    run_async(_list)


@catalog_app.command("update")
def update_product(
    name: str = typer.Argument(..., help="Current product name"),
    stock: int = typer.Argument(..., help="New stock"),
    price: float = typer.Argument(..., help="New price"),
    new_name: Optional[str] = typer.Option(None, "--rename", help="New product name"),
):
    """Update stock and price of a product, optionally renaming it"""
    data = validate(ProductUpdate, stock=stock, price=price, new_name=new_name)

    async def _update():
        async with lifespan():
            product = await CatalogService.update_product(name, data)
        if product:
            typer.echo(f'🔁 Updated: "{name}" to "{product.name}" | {stock} pcs at {fmt_price(price)}')
        else:
            typer.echo(NOT_FOUND)

    run_async(_update)


@catalog_app.command("delete")
def delete_product(name: str = typer.Argument(..., help="Product name")):
    """Delete product by name"""

    async def _delete():
        async with lifespan():
            product = await CatalogService.delete_product(name)
        typer.echo(f"🗑️  Deleted: {name}" if product else NOT_FOUND)

    run_async(_delete)


@book_app.command("add")
def add_book(
    title: str = typer.Argument(..., help="Book title"),
    author: str = typer.Argument(..., help="Author"),
    year: int = typer.Argument(..., help="Publication year"),
    cover_image: Optional[str] = typer.Option(None, "--cover", help="Cover image URL"),
):
    """Add a book"""
    data = validate(BookCreate, title=title, author=author, year=year, cover_image=cover_image)

    async def _add():
        async with lifespan():
            await BookService.add_book(data)
        typer.echo(f"✅ Added: {title} by {author} ({year})")

    run_async(_add)


@book_app.command("list")
def list_books():
    """List all books"""

    async def _list():
        async with lifespan():
            books = await BookService.list_books()
        typer.echo("📚 Books:")
        for i, b in enumerate(books, start=1):
            typer.echo(f"{i}. {b.title} - {b.author} ({b.year})")

    run_async(_list)


@book_app.command("delete")
def delete_book(title: str = typer.Argument(..., help="Book title")):
    """Delete books by title"""

    async def _delete():
        async with lifespan():
            deleted = await BookService.delete_book(title)
        typer.echo(f"🗑️  Deleted: {title}" if deleted else "⚠️  Book not found.")

    run_async(_delete)
