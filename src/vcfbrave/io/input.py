"""
Input Adapter: reading variant records from VCF/BCF.

Thin wrapper around ``pysam.VariantFile``; records are handed out as-is.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pysam

from ..errors import InputFileError

logger = logging.getLogger(__name__)


class VcfReader:
    """Reads records from a VCF or BCF file (plain or bgzipped)."""

    def __init__(self, path: Path):
        self.path = Path(path)
        if not self.path.exists():
            raise InputFileError(f"Variant file not found: {self.path}")
        try:
            self._vcf = pysam.VariantFile(str(self.path))
        except (OSError, ValueError) as e:
            raise InputFileError(f"Error opening variant file {self.path}: {e}") from e
        logger.debug(
            "Opened %s (%d samples)", self.path, self.sample_count
        )

    @property
    def sample_count(self) -> int:
        """Number of samples declared in the header."""
        return len(self._vcf.header.samples)

    def has_info(self, key: str) -> bool:
        """Whether the header declares INFO field ``key``."""
        return key in self._vcf.header.info

    def __iter__(self) -> Iterator[pysam.VariantRecord]:
        try:
            yield from self._vcf
        except (OSError, ValueError) as e:
            raise InputFileError(f"Error reading variant file {self.path}: {e}") from e

    def close(self):
        self._vcf.close()

    def __enter__(self) -> "VcfReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
