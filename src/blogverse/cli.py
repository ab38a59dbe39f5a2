"""Command-line interface for BlogVerse.

This module provides the CLI commands for running and managing
the BlogVerse authentication service.
"""

import asyncio
from typing import NoReturn

import click

from blogverse import __version__
from blogverse.core.config import get_settings
from blogverse.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="BlogVerse")
def cli() -> None:
    """BlogVerse - authentication service for the BlogVerse platform.

    Configuration is read from BLOGVERSE_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload (default: on in development)",
)
def serve(host: str | None, port: int | None, reload: bool | None) -> None:
    """Start the BlogVerse server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    if reload is None:
        reload = settings.is_development

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting BlogVerse server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "blogverse.infrastructure.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create all database tables.

    Use this only in development. In production, use migrations instead.
    """
    from blogverse.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize():
        db = get_db_manager()
        try:
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
def purge_tokens() -> None:
    """Delete expired verification and password reset tokens."""
    from blogverse.infrastructure.persistence.database import get_db_manager
    from blogverse.infrastructure.persistence.repositories import CredentialTokenRepository

    settings = get_settings()
    configure_logging(settings)

    async def purge() -> int:
        db = get_db_manager()
        try:
            async with db.session() as session:
                deleted = await CredentialTokenRepository(session).delete_expired()
                await session.commit()
                return deleted
        finally:
            await db.disconnect()

    deleted = asyncio.run(purge())
    click.echo(f"Deleted {deleted} expired token(s).")


@cli.command()
def info() -> None:
    """Display BlogVerse configuration."""
    settings = get_settings()

    click.echo(f"""
BlogVerse v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}

Database:
  URL:          {settings.database_url}
  Echo:         {settings.db_echo}

Email:
  Backend:      {settings.email_backend}
  From:         {settings.from_name} <{settings.from_email}>
  Frontend URL: {settings.frontend_url}

Security:
  Secret Key:   {"DEFAULT (change me)" if settings.uses_default_secret else "configured"}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
