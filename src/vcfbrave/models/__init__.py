"""
Data models for vcfbrave.

Provides Pydantic models for variants, distributions and run configuration.
"""

from .core import AnnotationSchema, ClnsigMode, Distribution, SubmitConfig, Variant

__all__ = [
    "AnnotationSchema",
    "ClnsigMode",
    "Distribution",
    "SubmitConfig",
    "Variant",
]
