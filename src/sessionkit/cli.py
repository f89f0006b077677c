"""Command-line interface for SessionKit.

This module provides the CLI commands for running and maintaining the
SessionKit service.
"""

import asyncio
from datetime import timedelta

import click

from sessionkit import __version__
from sessionkit.core.config import get_settings
from sessionkit.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="SessionKit")
def cli() -> None:
    """SessionKit - user registration, login and JWT session refresh."""


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the SessionKit server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)

    bind_host = host or settings.host
    bind_port = port or settings.port

    logger = get_logger(__name__)
    logger.info(
        "Starting SessionKit server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "sessionkit.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create any missing database tables.

    This is how production deployments create their schema; the app only
    creates tables on startup outside production.
    """
    from sessionkit.infrastructure.persistence.database import close_database, init_database

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo("ERROR: Running in production mode. Pass --force to continue.", err=True)
        raise SystemExit(1)

    async def initialize() -> None:
        try:
            await init_database(create_tables=True)
            click.echo("Database initialized successfully.")
        finally:
            await close_database()

    asyncio.run(initialize())


@cli.command()
def cleanup_tokens() -> None:
    """Delete expired refresh tokens once.

    Meant to be run by an external scheduler such as cron when the
    in-process cleanup loop is disabled.
    """
    from sessionkit.infrastructure.jobs import cleanup_expired_tokens
    from sessionkit.infrastructure.persistence.database import close_database, get_db_manager

    settings = get_settings()
    configure_logging(settings)

    async def run() -> int | None:
        try:
            return await cleanup_expired_tokens(
                get_db_manager().session_factory,
                retention=timedelta(days=settings.refresh_token_retention_days),
            )
        finally:
            await close_database()

    deleted = asyncio.run(run())
    if deleted is None:
        click.echo("Token cleanup failed, see logs for details.", err=True)
        raise SystemExit(1)
    click.echo(f"Deleted {deleted} expired refresh token(s).")


@cli.command()
def info() -> None:
    """Display SessionKit configuration."""
    settings = get_settings()
    cleanup = (
        f"every {settings.token_cleanup_interval_seconds}s"
        if settings.token_cleanup_enabled
        else "disabled"
    )

    click.echo(f"""
SessionKit v{settings.app_version}
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

Tokens:
  Access Exp:   {settings.access_token_expire_minutes} minutes
  Refresh Exp:  {settings.refresh_token_expire_days} days
  Cleanup:      {cleanup}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
