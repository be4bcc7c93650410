from pathlib import Path
from typing import Optional

import typer

from shared.config import storage
from shared.observability import setup_observability
from .repository import UserRepository

user_app = typer.Typer(
    name="users",
    help="User CRUD backed by a local JSON file",
    no_args_is_help=True,
)


@user_app.callback()
def startup(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", envvar="USERS_FILE", help="JSON file holding the users [default: data/users.json]"
    ),
):
    setup_observability("user_service")
    ctx.obj = UserRepository(file or storage.USERS_FILE)


from . import commands  # noqa: E402,F401  registers the commands on user_app
