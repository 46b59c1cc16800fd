"""
Record Normalization.

Turns one variant record (a ``pysam.VariantRecord`` or anything exposing the
same attributes) into the canonical :class:`~vcfbrave.models.core.Variant`.
No I/O happens here; the caller owns the reader and the catalog client.
"""

import logging
from typing import Any

from .core.annotation import extract_annotations
from .core.stats import calc_distribution, per_sample_values
from .errors import MissingContig, MissingReferenceAllele
from .models.core import ClnsigMode, SubmitConfig, Variant

logger = logging.getLogger(__name__)

__all__ = ["RecordNormalizer", "get_snp_ids", "get_allele_frequency", "get_clnsig"]

MISSING = "."
SAMPLE_COUNT = "NS"
COVERAGE = "DP"
GENOTYPE_QUALITY = "GQ"
ALLELE_FREQUENCY = "AF"
CLINICAL_SIGNIFICANCE = "CLNSIG"


def get_snp_ids(record: Any) -> list[str] | None:
    """dbSNP-style identifiers from the ID column, or None when missing."""
    rid = record.id
    if rid is None or rid == MISSING:
        return None
    return rid.split(";")


def get_allele_frequency(record: Any) -> list[float | None]:
    """
    One frequency per alternate allele.

    Empty when AF is absent or every entry is missing; a missing entry next
    to known ones stays None so positions still line up with the ALT alleles.
    """
    af = record.info.get(ALLELE_FREQUENCY)
    if not isinstance(af, (tuple, list)):
        af = [af]
    if all(x is None for x in af):
        return []
    return [None if x is None else float(x) for x in af]


def get_clnsig(record: Any, mode: ClnsigMode) -> str | None:
    """Clinical significance collapsed into one string, per ``mode``."""
    clnsig = record.info.get(CLINICAL_SIGNIFICANCE)
    if clnsig is None:
        return None
    if isinstance(clnsig, str):
        values = [clnsig]
    else:
        values = [str(x) for x in clnsig]
    if not values:
        return None
    if mode == ClnsigMode.FIRST:
        return values[0]
    return ",".join(values)


class RecordNormalizer:
    """
    Builds Variants for one run.

    Args:
        config: Run configuration (dataset, assembly, CLNSIG mode, annotation schema).
        total_samples: Number of samples declared in the file header.
        has_sample_count: Whether the header declares the ``NS`` INFO field.
    """

    def __init__(self, config: SubmitConfig, total_samples: int, has_sample_count: bool):
        self.config = config
        self.total_samples = total_samples
        self.has_sample_count = has_sample_count

    def normalize(self, record: Any) -> Variant:
        snp_ids = get_snp_ids(record)
        allele_frequency = get_allele_frequency(record)
        coverage = calc_distribution(per_sample_values(record, COVERAGE), COVERAGE)
        genotype_quality = calc_distribution(
            per_sample_values(record, GENOTYPE_QUALITY), GENOTYPE_QUALITY
        )

        # pysam exposes the 0-based start; the catalog stores 1-based positions
        start = record.start + 1
        reference_name = self._reference_name(record, start)
        reference_bases, alternate_bases = self._alleles(record, start)

        clnsig = get_clnsig(record, self.config.clnsig_mode)
        sample_count = self._sample_count(record)

        schema = self.config.annotation
        annotations = extract_annotations(record.info.get(schema.info_key), schema)

        return Variant(
            id=None,
            dataset_id=self.config.dataset_id,
            total_samples=self.total_samples,
            assembly_id=self.config.assembly_id,
            snp_ids=snp_ids,
            reference_name=reference_name,
            start=start,
            reference_bases=reference_bases,
            alternate_bases=alternate_bases,
            gene_symbol=annotations.gene_symbol,
            allele_frequency=allele_frequency,
            sample_count=sample_count,
            coverage=coverage,
            genotype_quality=genotype_quality,
            clnsig=clnsig,
            hgvs=annotations.hgvs,
            variant_type=annotations.variant_type,
        )

    @staticmethod
    def _reference_name(record: Any, start: int) -> str:
        rid = record.rid
        if rid is None or rid < 0 or not record.chrom:
            raise MissingContig(start)
        return record.chrom

    @staticmethod
    def _alleles(record: Any, start: int) -> tuple[str, list[str]]:
        alleles = record.alleles
        if not alleles:
            raise MissingReferenceAllele(start)
        return alleles[0], list(alleles[1:])

    def _sample_count(self, record: Any) -> int | None:
        if not self.has_sample_count:
            return None
        ns = record.info.get(SAMPLE_COUNT)
        if isinstance(ns, (tuple, list)):
            ns = ns[0] if ns else None
        return ns
