"""Pytest configuration and fixtures."""

import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add src directory to path so tests use local code, not installed package
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


VCF_HEADER = """\
##fileformat=VCFv4.2
##FILTER=<ID=PASS,Description="All filters passed">
##FILTER=<ID=LowQual,Description="Low quality">
##contig=<ID=chr1,length=248956422>
##contig=<ID=chr2,length=242193529>
##INFO=<ID=AF,Number=A,Type=Float,Description="Allele Frequency">
##INFO=<ID=CLNSIG,Number=.,Type=String,Description="Clinical significance">
##INFO=<ID=ANN,Number=.,Type=String,Description="Functional annotations">
"""

NS_HEADER = '##INFO=<ID=NS,Number=1,Type=Integer,Description="Samples with data">\n'

FORMAT_HEADER = """\
##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">
##FORMAT=<ID=DP,Number=1,Type=Integer,Description="Read depth">
##FORMAT=<ID=GQ,Number=1,Type=Integer,Description="Genotype quality">
"""

ANN_1 = "A|B|C|GENE1|E|TYPE1|G|H|I|HGVS1"
ANN_2 = "A|B|C|GENE2|E|TYPE2|G|H|I|HGVS2"


def vcf_line(
    chrom: str = "chr1",
    pos: int = 100,
    vid: str = ".",
    ref: str = "A",
    alt: str = "G",
    filt: str = "PASS",
    info: str = ".",
    samples: Sequence[str] = ("0/1:10:30", "0/0:20:40", "1/1:30:50"),
) -> str:
    """Build one tab-separated VCF data line."""
    return "\t".join([chrom, str(pos), vid, ref, alt, "50", filt, info, "GT:DP:GQ", *samples])


@pytest.fixture
def write_vcf(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a small text VCF and returning its path."""

    def _write(
        lines: Sequence[str],
        samples: Sequence[str] = ("S1", "S2", "S3"),
        with_ns: bool = True,
        name: str = "variants.vcf",
    ) -> Path:
        path = tmp_path / name
        with open(path, "w") as f:
            f.write(VCF_HEADER)
            if with_ns:
                f.write(NS_HEADER)
            f.write(FORMAT_HEADER)
            f.write("\t".join(["#CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO", "FORMAT", *samples]))
            f.write("\n")
            for line in lines:
                f.write(line + "\n")
        return path

    return _write


@pytest.fixture
def ten_record_vcf(write_vcf) -> Path:
    """Ten records, seven of them PASS."""
    filters = ["PASS", "PASS", "LowQual", "PASS", "PASS", "LowQual", "PASS", "PASS", "LowQual", "PASS"]
    lines = [vcf_line(pos=100 + i * 10, vid=f"rs{i}", filt=f) for i, f in enumerate(filters)]
    return write_vcf(lines)


def fake_record(**overrides) -> SimpleNamespace:
    """A record-like object for shapes pysam cannot produce."""
    fields = dict(
        id=None,
        info={},
        samples={"S1": {"DP": 10, "GQ": 20}, "S2": {"DP": 30, "GQ": 40}},
        start=99,
        rid=0,
        chrom="chr1",
        alleles=("A", "G"),
        filter={"PASS": None},
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)
