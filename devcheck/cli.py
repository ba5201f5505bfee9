"""
Command line entry points: ``devcheck`` lists databases, ``devcheck-seed`` initializes the app database.
"""
import asyncio
import logging

import click
from dotenv import find_dotenv, load_dotenv

from . import check_mongo, init_db
from .errors import DevCheckError
from .models import Settings, resolve_uri

logger = logging.getLogger(__name__)

uri_option = click.option(
    "--uri",
    default=None,
    envvar="MONGODB_URI",
    help="(Default: env var `MONGODB_URI`, else `mongodb://localhost:27017`) MongoDB connection URI",
)
log_level_option = click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="DEVCHECK_LOG_LEVEL",
    help="(Default: `WARNING`) Log level; logs go to stderr",
)


def _configure_logging(level):
    logging.basicConfig(level=level.upper(), format="[devcheck] %(levelname)s - %(message)s")


def _run(coro):
    try:
        return asyncio.run(coro)
    except DevCheckError as e:
        logger.error("%s", e)
        logger.debug("check failed", exc_info=True)
        raise click.ClickException(str(e)) from e


@click.command()
@uri_option
@log_level_option
def check_command(uri, log_level):
    """Connect to MongoDB and print the databases it reports."""
    _configure_logging(log_level)
    _run(check_mongo.check(resolve_uri(uri)))


@click.command()
@uri_option
@log_level_option
def seed_command(uri, log_level):
    """Create the application user and collections."""
    _configure_logging(log_level)
    settings = Settings.from_env()
    uri = resolve_uri(uri)
    print(check_mongo.TARGET_LINE.format(uri))

    async def _seed():
        options = check_mongo.parse_options(uri)
        client = check_mongo.open_client(options)
        try:
            await init_db.seed(client, settings)
        finally:
            client.close()

    _run(_seed())


def _load_env():
    # variables already in the environment win over .env
    load_dotenv(find_dotenv(usecwd=True))


def main():
    _load_env()
    check_command()


def seed_main():
    _load_env()
    seed_command()
