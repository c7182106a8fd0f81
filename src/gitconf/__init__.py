"""Top-level package for gitconf.

Read and edit git-style configuration files without losing their formatting.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gitconf")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
