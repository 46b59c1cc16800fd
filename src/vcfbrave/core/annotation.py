"""
Annotation Extractor: pipe-delimited functional annotations.

An INFO annotation field holds one block per affected feature, blocks are
comma-separated and each block is split on ``|`` into positional sub-fields.
"""

from collections.abc import Sequence
from typing import NamedTuple

from ..errors import AnnotationIndexOutOfRange
from ..models.core import AnnotationSchema

__all__ = [
    "AnnotationFields",
    "split_annotations",
    "extract_field",
    "extract_annotations",
]


class AnnotationFields(NamedTuple):
    gene_symbol: list[str] | None
    variant_type: list[str] | None
    hgvs: list[str] | None


def split_annotations(raw: str | Sequence[str]) -> list[list[str]]:
    """
    Split a raw annotation value into blocks of sub-fields.

    pysam already splits multi-valued INFO fields on commas and hands back a
    tuple; a single string is split here instead.
    """
    if isinstance(raw, str):
        raw = raw.split(",")
    return [block.split("|") for block in raw]


def extract_field(blocks: Sequence[Sequence[str]], index: int) -> list[str]:
    """Gather sub-field ``index`` from every block, in block order."""
    values = []
    for block in blocks:
        if index >= len(block):
            raise AnnotationIndexOutOfRange(index, len(block), "|".join(block))
        values.append(block[index])
    return values


def extract_annotations(
    raw: str | Sequence[str] | None, schema: AnnotationSchema
) -> AnnotationFields:
    """
    Resolve gene symbols, variant types and HGVS notations.

    All three are ``None`` together when the annotation field is absent.
    """
    if raw is None:
        return AnnotationFields(None, None, None)

    blocks = split_annotations(raw)
    return AnnotationFields(
        gene_symbol=extract_field(blocks, schema.gene_symbol),
        variant_type=extract_field(blocks, schema.variant_type),
        hgvs=extract_field(blocks, schema.hgvs),
    )
