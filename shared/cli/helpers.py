import asyncio
from typing import Awaitable, Callable, TypeVar

import typer
from pydantic import ValidationError

from shared.config.database import DatabaseConnectionError

T = TypeVar("T")


def run_async(fn: Callable[..., Awaitable[T]], *args, **kwargs) -> T:
    """
    Runs one command coroutine to completion.
    A failed connection or a rejected write ends the process with status 1.
    """
    try:
        return asyncio.run(fn(*args, **kwargs))
    except DatabaseConnectionError as e:
        typer.echo(f"❌ MongoDB connection error: {e}", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)


def validate(schema, **fields):
    """Builds the input schema, or prints the first bad field and exits with status 1."""
    try:
        return schema(**fields)
    except ValidationError as e:
        err = e.errors()[0]
        typer.echo(f"❌ Invalid {err['loc'][0]}: {err['msg']}", err=True)
        raise typer.Exit(code=1)


def fmt_price(price: float) -> str:
    return f"${price:.2f}"


def print_products(products) -> None:
    typer.echo("📦 Products:")
    for i, p in enumerate(products, start=1):
        typer.echo(f"{i}. {p.name} - {p.stock} pcs - {fmt_price(p.price)}")
