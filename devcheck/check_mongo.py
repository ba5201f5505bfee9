"""Connectivity check for the MongoDB server used by the development environment.
Run this after starting MongoDB to verify Motor can connect and list databases.
"""
import logging
import sys

import dns.exception
import motor.motor_asyncio
from pymongo import uri_parser
from pymongo.errors import ConfigurationError as MongoConfigurationError
from pymongo.errors import PyMongoError

from .errors import ConfigurationError, ConnectivityError
from .models import DatabaseListing

logger = logging.getLogger(__name__)

BANNER = 'MongoDB Development Environment - v0.4 [DEV]'
TARGET_LINE = 'Connecting to MongoDB at: {}'
HEADER = 'Available databases:'
SUCCESS = 'MongoDB connection successful!'

SRV_SCHEME = 'mongodb+srv://'
# these mechanisms authenticate against $external, never the URI database
EXTERNAL_AUTH_MECHANISMS = ('MONGODB-X509', 'GSSAPI', 'MONGODB-AWS', 'MONGODB-OIDC')
# only meaningful while resolving a SRV URI, which parse_options has already done
SRV_ONLY_OPTIONS = ('srvservicename', 'srvmaxhosts')


def _is_dns_failure(error):
    return isinstance(error.__cause__, dns.exception.DNSException) or 'DNS' in str(error)


def parse_options(uri):
    """Parse the URI with the driver's own parser.

    Option values are left as strings; the client validates them in open_client.
    A SRV URI is resolved here, so a failed DNS lookup is a ConnectivityError,
    anything else the parser rejects is a ConfigurationError.
    """
    try:
        return uri_parser.parse_uri(uri, validate=False)
    except MongoConfigurationError as e:
        if uri.startswith(SRV_SCHEME) and _is_dns_failure(e):
            raise ConnectivityError(f'cannot resolve {uri!r}: {e}') from e
        raise ConfigurationError(f'invalid MongoDB URI {uri!r}: {e}') from e
    except ValueError as e:
        raise ConfigurationError(f'invalid MongoDB URI {uri!r}: {e}') from e


def _seed_address(host, port):
    if host.endswith('.sock') or port is None:
        return host
    if ':' in host:
        return f'[{host}]:{port}'
    return f'{host}:{port}'


def open_client(options):
    """Build the client from parsed URI options. No network I/O, the driver connects on first command."""
    hosts = [_seed_address(host, port) for host, port in options['nodelist']]
    uri_opts = options['options']
    kwargs = {
        key: value for key, value in uri_opts.items()
        if key.lower() not in SRV_ONLY_OPTIONS
    }
    if options.get('username') is not None:
        kwargs['username'] = options['username']
        kwargs['password'] = options.get('password')
        mechanism = str(uri_opts.get('authmechanism') or '').upper()
        if (options.get('database') and 'authsource' not in uri_opts
                and mechanism not in EXTERNAL_AUTH_MECHANISMS):
            kwargs['authsource'] = options['database']
    try:
        return motor.motor_asyncio.AsyncIOMotorClient(hosts, **kwargs)
    except (MongoConfigurationError, ValueError, TypeError) as e:
        raise ConfigurationError(f'cannot create client for {", ".join(hosts)}: {e}') from e


async def list_databases(client):
    """Ask the server for its database names. Single attempt."""
    try:
        return await client.list_database_names()
    except PyMongoError as e:
        raise ConnectivityError(f'listing databases failed: {e}') from e


def report(listing, out=None):
    out = out or sys.stdout
    print(HEADER, file=out)
    for name in listing.databases:
        print(f'  - {name}', file=out)
    print(file=out)
    print(SUCCESS, file=out)


async def check(uri, out=None):
    out = out or sys.stdout
    print(BANNER, file=out)
    print(TARGET_LINE.format(uri), file=out)

    options = parse_options(uri)
    logger.debug('parsed URI options')
    client = open_client(options)
    try:
        names = await list_databases(client)
    finally:
        client.close()
    logger.debug('server reported %d databases', len(names))

    listing = DatabaseListing(target=uri, databases=names)
    report(listing, out)
    return listing
