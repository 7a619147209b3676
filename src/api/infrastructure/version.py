"""Colloquy API version, as reported by FastAPI and the startup probe."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "colloquy-api"

# Reported when running from a checkout that was never installed
UNKNOWN_VERSION = "0.0.0+unknown"

try:
    __version__ = version(DISTRIBUTION_NAME)
except PackageNotFoundError:
    __version__ = UNKNOWN_VERSION
