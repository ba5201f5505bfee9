"""
Error kinds raised by the check. Both are fatal; the CLI maps either one to exit status 1.
"""


class DevCheckError(Exception):
    pass


class ConfigurationError(DevCheckError):
    """The URI could not be parsed, or no client could be built from it."""


class ConnectivityError(DevCheckError):
    """A command sent to the server did not complete (unreachable, refused, auth, timeout)."""
