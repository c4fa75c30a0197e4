"""oscwire - Open Sound Control packet encoding."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("oscwire")
except PackageNotFoundError:
    __version__ = "(local)"
