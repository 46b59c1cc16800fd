"""
vcfbrave - Submit VCF variants to a BraVE variant catalog.

This package provides a command-line interface and Python API that
summarizes each record of a VCF/BCF file (per-sample depth and genotype
quality, functional annotations, clinical significance) and posts it to
the catalog's REST API.

Example usage:
    $ vcfbrave submit --dataset cohort1 --assembly GRCh38 variants.vcf.gz
"""

__version__ = "0.1.0"

from .errors import VcfBraveError
from .models.core import ClnsigMode, Distribution, SubmitConfig, Variant
from .pipeline import Pipeline, RunSummary

__all__ = [
    "__version__",
    "ClnsigMode",
    "Distribution",
    "Pipeline",
    "RunSummary",
    "SubmitConfig",
    "Variant",
    "VcfBraveError",
]
