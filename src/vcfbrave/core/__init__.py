"""
Core module for vcfbrave.

Provides the per-sample statistics and annotation parsing used when
normalizing records.
"""

from .annotation import AnnotationFields, extract_annotations, extract_field, split_annotations
from .stats import calc_distribution, per_sample_values, quantile

__all__ = [
    "AnnotationFields",
    "calc_distribution",
    "extract_annotations",
    "extract_field",
    "per_sample_values",
    "quantile",
    "split_annotations",
]
