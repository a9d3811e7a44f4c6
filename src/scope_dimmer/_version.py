"""Version information for scope-dimmer."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("scope-dimmer")
except PackageNotFoundError:
    # Source checkout that was never installed
    __version__ = "0+unknown"

__all__ = ["__version__"]
