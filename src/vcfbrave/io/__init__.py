"""
I/O module for vcfbrave.

Provides the variant file reader and the catalog submission client.
"""

from .input import VcfReader
from .submit import CatalogClient

__all__ = [
    "CatalogClient",
    "VcfReader",
]
