import os
import pytest
from unittest.mock import AsyncMock, MagicMock, patch


ENV_VARS = [
    'MONGODB_URI',
    'MONGODB_APP_DB',
    'MONGODB_APP_USER',
    'MONGODB_APP_PASSWORD',
    'DEVCHECK_LOG_LEVEL',
]


@pytest.fixture
def clean_env():
    """Clean environment variables before each test"""
    old_values = {}
    for var in ENV_VARS:
        old_values[var] = os.environ.pop(var, None)

    yield

    for var, value in old_values.items():
        if value is not None:
            os.environ[var] = value
        else:
            os.environ.pop(var, None)


@pytest.fixture
def mock_client():
    """Patch the Motor client class; the server reports admin, config, local"""
    with patch('motor.motor_asyncio.AsyncIOMotorClient') as client_cls:
        client = MagicMock()
        client.list_database_names = AsyncMock(return_value=['admin', 'config', 'local'])
        client_cls.return_value = client
        yield client_cls
