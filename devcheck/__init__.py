"""
MongoDB connectivity check for the development environment.
"""

from .check_mongo import check
from .errors import ConfigurationError, ConnectivityError, DevCheckError
from .models import DEFAULT_MONGODB_URI, DatabaseListing, Settings, resolve_uri

__version__ = "0.4.0"
