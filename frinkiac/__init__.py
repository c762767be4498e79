"""Frinkiac client library and frame grid UI"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("frinkiac-client")
except PackageNotFoundError:
    __version__ = "dev"
