"""
Exception hierarchy for vcfbrave.

Every error raised here is fatal for the run: the pipeline does not skip
records or retry submissions.
"""

__all__ = [
    "VcfBraveError",
    "InputFileError",
    "RecordError",
    "MissingContig",
    "MissingReferenceAllele",
    "EmptyDistributionError",
    "AnnotationIndexOutOfRange",
    "SubmissionError",
]


class VcfBraveError(Exception):
    """Base class for all vcfbrave errors."""


class InputFileError(VcfBraveError):
    """The variant file could not be opened or parsed."""


class RecordError(VcfBraveError):
    """A single variant record is malformed."""


class MissingContig(RecordError):
    """Record carries no contig (CHROM) index."""

    def __init__(self, start: int):
        self.start = start
        super().__init__(f"Missing CHROM at position {start}")


class MissingReferenceAllele(RecordError):
    """Record has an empty allele list."""

    def __init__(self, start: int):
        self.start = start
        super().__init__(f"Missing REF at position {start}")


class EmptyDistributionError(VcfBraveError):
    """No per-sample values were available to summarize."""

    def __init__(self, tag: str | None = None):
        self.tag = tag
        if tag:
            message = f"No non-missing per-sample values for FORMAT/{tag}"
        else:
            message = "Cannot compute a distribution over zero values"
        super().__init__(message)


class AnnotationIndexOutOfRange(VcfBraveError):
    """An annotation block has fewer sub-fields than requested."""

    def __init__(self, index: int, length: int, block: str = ""):
        self.index = index
        self.length = length
        self.block = block
        super().__init__(
            f"Annotation sub-field {index} requested but block has only {length} fields"
            + (f": {block!r}" if block else "")
        )


class SubmissionError(VcfBraveError):
    """The catalog rejected a variant or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)
