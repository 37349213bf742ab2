"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cpdrate")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = ["__version__"]
