# Settings and result models for the connectivity check.
# Values come from the environment; an unset or empty variable means "use the default".
import os
from pydantic import BaseModel, Field
from typing import List, Mapping, Optional

DEFAULT_MONGODB_URI = 'mongodb://localhost:27017'
DEFAULT_APP_DB = 'set_app_db'
DEFAULT_APP_USER = 'app_user'
DEFAULT_APP_PASSWORD = 'DevPassword123'


def resolve_uri(value: Optional[str]) -> str:
    """Return value unchanged, or the local default when it is unset or empty."""
    return value or DEFAULT_MONGODB_URI


def _env(environ, key, default):
    return environ.get(key) or default


class Settings(BaseModel):
    mongodb_uri: str = DEFAULT_MONGODB_URI
    app_db: str = DEFAULT_APP_DB
    app_user: str = DEFAULT_APP_USER
    app_password: str = Field(default=DEFAULT_APP_PASSWORD, repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        if environ is None:
            environ = os.environ
        return cls(
            mongodb_uri=resolve_uri(environ.get('MONGODB_URI')),
            app_db=_env(environ, 'MONGODB_APP_DB', DEFAULT_APP_DB),
            app_user=_env(environ, 'MONGODB_APP_USER', DEFAULT_APP_USER),
            app_password=_env(environ, 'MONGODB_APP_PASSWORD', DEFAULT_APP_PASSWORD),
        )


class DatabaseListing(BaseModel):
    target: str
    databases: List[str] = Field(default_factory=list)
