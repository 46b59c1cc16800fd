"""
Core data models for vcfbrave.
"""

from enum import Enum
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClnsigMode(str, Enum):
    """How multiple CLNSIG values are collapsed into one string."""
    JOIN = "join"
    FIRST = "first"


class Distribution(BaseModel):
    """
    Summary statistics of one FORMAT tag across the samples of a record.
    """
    model_config = ConfigDict(frozen=True)

    min: float
    q25: float
    median: float
    q75: float
    max: float
    mean: float


class Variant(BaseModel):
    """
    Canonical variant representation submitted to the catalog.

    Attribute names are snake_case; the wire representation uses the
    camelCase aliases (``variant_type`` travels as ``type``).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    dataset_id: str = Field(alias="datasetId")
    total_samples: int = Field(alias="totalSamples", ge=0)
    assembly_id: str = Field(alias="assemblyId")
    snp_ids: list[str] | None = Field(default=None, alias="snpIds")
    reference_name: str = Field(alias="referenceName")
    start: int = Field(ge=1, description="1-based position of the variant")
    reference_bases: str = Field(alias="referenceBases")
    alternate_bases: list[str] = Field(default_factory=list, alias="alternateBases")
    gene_symbol: list[str] | None = Field(default=None, alias="geneSymbol")
    allele_frequency: list[float | None] = Field(default_factory=list, alias="alleleFrequency")
    sample_count: int | None = Field(default=None, alias="sampleCount")
    coverage: Distribution
    genotype_quality: Distribution = Field(alias="genotypeQuality")
    clnsig: str | None = None
    hgvs: list[str] | None = None
    variant_type: list[str] | None = Field(default=None, alias="type")

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready payload with the catalog's field names."""
        return self.model_dump(mode="json", by_alias=True)


class AnnotationSchema(BaseModel):
    """
    Named lookup of positional sub-fields inside one annotation block.

    The defaults match the pipe-delimited ``ANN`` layout written by the
    upstream annotator.
    """
    model_config = ConfigDict(frozen=True)

    info_key: str = "ANN"
    gene_symbol: int = Field(default=3, ge=0)
    variant_type: int = Field(default=5, ge=0)
    hgvs: int = Field(default=9, ge=0)


class SubmitConfig(BaseModel):
    """
    Run-scoped configuration, fixed for the whole run.
    """
    model_config = ConfigDict(frozen=True)

    # Target
    host: str = "http://localhost:8080"
    dataset_id: str
    assembly_id: str

    # Credentials
    username: str = "admin"
    password: str | None = None

    # Behaviour
    filter_variants: bool = True
    dry_run: bool = False
    debug: bool = False
    verify_ssl: bool = True
    clnsig_mode: ClnsigMode = ClnsigMode.JOIN
    annotation: AnnotationSchema = Field(default_factory=AnnotationSchema)
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"Host must be an http(s) URL: {v}")
        return v.rstrip("/")

    @field_validator("dataset_id", "assembly_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value must not be empty")
        return v

    @property
    def variants_url(self) -> str:
        return f"{self.host}/variants"
