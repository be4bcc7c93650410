from typing import Optional

import typer

from shared.cli import validate
from .main import user_app
from .models import User
from .schemas import UserCreate, UserUpdate
from .service import UserService

NOT_FOUND = "❌ User not found"


def _show(user: User) -> str:
    return user.model_dump_json(indent=2)


@user_app.command("create")
def create_user(
    ctx: typer.Context,
    first_name: str = typer.Argument(..., help="First name"),
    last_name: str = typer.Argument(..., help="Last name"),
    age: int = typer.Argument(..., help="Age"),
):
    """Create a user"""
    data = validate(UserCreate, first_name=first_name, last_name=last_name, age=age)
    user = UserService.create_user(ctx.obj, data)
    typer.echo(f"✅ Created: {_show(user)}")


@user_app.command("read")
def read_users(ctx: typer.Context):
    """List all users"""
    typer.echo("📄 All Users:")
    for u in UserService.list_users(ctx.obj):
        typer.echo(f"{u.id}: {u.first_name} {u.last_name} ({u.age})")


@user_app.command("get")
def get_user(ctx: typer.Context, user_id: str = typer.Argument(..., help="User id")):
    """Show one user"""
    user = UserService.get_user(ctx.obj, user_id)
    typer.echo(f"🔍 Found: {_show(user)}" if user else NOT_FOUND)


@user_app.command("update")
def update_user(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., help="User id"),
    first_name: Optional[str] = typer.Argument(None, help="New first name"),
    last_name: Optional[str] = typer.Argument(None, help="New last name"),
    age: Optional[int] = typer.Argument(None, help="New age"),
):
    """Update the given fields of a user"""
    data = validate(UserUpdate, first_name=first_name, last_name=last_name, age=age)
    user = UserService.update_user(ctx.obj, user_id, data)
    typer.echo(f"🔁 Updated: {_show(user)}" if user else NOT_FOUND)


@user_app.command("delete")
def delete_user(ctx: typer.Context, user_id: str = typer.Argument(..., help="User id")):
    """Delete a user"""
    typer.echo("🗑️ User deleted" if UserService.delete_user(ctx.obj, user_id) else NOT_FOUND)
