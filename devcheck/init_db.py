"""
Seed the application database: one readWrite user and the collections the app expects.
Meant to run once against a fresh development server.
"""
import logging
import sys

from pymongo.errors import PyMongoError

from .errors import ConnectivityError

logger = logging.getLogger(__name__)

APP_COLLECTIONS = ('setplayers', 'setgames', 'setstats')


async def seed(client, settings, out=None):
    out = out or sys.stdout
    db = client[settings.app_db]
    try:
        await db.command(
            'createUser',
            settings.app_user,
            pwd=settings.app_password,
            roles=[{'role': 'readWrite', 'db': settings.app_db}],
        )
        logger.info('created user %s on %s', settings.app_user, settings.app_db)

        existing = set(await db.list_collection_names())
        for name in APP_COLLECTIONS:
            if name in existing:
                logger.info('collection %s already exists', name)
                continue
            await db.create_collection(name)
    except PyMongoError as e:
        raise ConnectivityError(f'seeding {settings.app_db} failed: {e}') from e

    print(f'Database initialized: {settings.app_db}', file=out)
