"""Holdem CLI application using Typer.

This module provides command-line utilities for the holdem server:
secret generation for deployment configuration, user administration
against the configured database, and running the API.
"""

import asyncio
import secrets

import typer
from rich.console import Console
from rich.table import Table

from holdem_config.settings import get_settings
from holdem_identity import (
    AuthenticationService,
    JWTService,
    PasswordHashingService,
    User,
    UserNotFoundError,
)
from holdem_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

app = typer.Typer(
    name="holdem",
    help="Texas Holdem server CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

users_app = typer.Typer(
    name="users",
    help="User administration against the configured database",
    no_args_is_help=True,
)
app.add_typer(users_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a signing secret for session tokens.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Holdem Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}", soft_wrap=True)

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]\n"
    )


async def _with_auth_service(action):
    """Run ``action(service)`` inside a committed database transaction."""
    from holdem.presentation.api.dependencies import (
        MEMORY_DATABASE_URL,
        create_tables,
        get_engine,
        get_session_maker,
    )

    settings = get_settings()
    if settings.database_url == MEMORY_DATABASE_URL:
        console.print("[red]The in-memory store cannot be administered from the CLI.[/red]")
        raise typer.Exit(code=1)

    engine = get_engine(settings.database_url)
    try:
        await create_tables(engine)
        async with get_session_maker(settings.database_url)() as session:
            service = AuthenticationService(
                user_repository=UserRepositorySQLAlchemy(session),
                password_service=PasswordHashingService(
                    rounds=settings.password_hash_rounds,
                ),
                jwt_service=JWTService(
                    secret_key=settings.jwt_secret_key.get_secret_value(),
                    access_token_expire_hours=settings.jwt_access_token_expire_hours,
                    algorithm=settings.jwt_algorithm,
                ),
            )
            result = await action(service)
            await session.commit()
            return result
    finally:
        await engine.dispose()


def _users_table(users: list[User]) -> Table:
    table = Table(title="Registered users")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Date of birth")
    table.add_column("Created", style="dim")
    for user in users:
        table.add_row(
            user.id,
            user.name,
            user.date_of_birth.isoformat() if user.date_of_birth else "-",
            user.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    return table


@users_app.command("list")
def list_users() -> None:
    """List all registered users."""

    async def action(service: AuthenticationService) -> list[User]:
        return await service.list_users()

    users = asyncio.run(_with_auth_service(action))
    if not users:
        console.print("[dim]No users registered.[/dim]")
        return
    console.print(_users_table(users))


@users_app.command("delete")
def delete_user(user_id: str = typer.Argument(..., help="ID of the user")) -> None:
    """Delete a single user."""

    async def action(service: AuthenticationService) -> None:
        await service.delete_user(user_id)

    try:
        asyncio.run(_with_auth_service(action))
    except UserNotFoundError:
        console.print(f"[red]User not found:[/red] {user_id}")
        raise typer.Exit(code=1) from None
    console.print(f"[green]Deleted user[/green] {user_id}")


@users_app.command("purge")
def purge_users(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete every registered user."""
    if not yes:
        typer.confirm("Delete ALL users?", abort=True)

    async def action(service: AuthenticationService) -> int:
        return await service.delete_all_users()

    removed = asyncio.run(_with_auth_service(action))
    console.print(f"[green]Deleted {removed} user(s)[/green]")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default from settings)"),
    port: int | None = typer.Option(None, help="Port (default from settings)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "holdem.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
