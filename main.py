import typer

from services.catalog_service.main import catalog_app
from services.product_service.main import product_app
from services.user_service.main import user_app

__version__ = "1.0.0"

app = typer.Typer(
    name="crud-cli",
    help="NoSQL CRUD lessons: native driver, schema mapper and JSON file variants",
    no_args_is_help=True,
)

app.add_typer(product_app, name="products")
app.add_typer(catalog_app, name="catalog")
app.add_typer(user_app, name="users")


def _version(value: bool):
    if value:
        typer.echo(f"crud-cli {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    version: bool = typer.Option(
        False, "--version", callback=_version, is_eager=True, help="Show the version and exit"
    ),
):
    pass


def main() -> None:
    app()


if __name__ == "__main__":
    main()
