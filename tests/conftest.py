"""Pytest fixtures for vcf_ingest tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from vcf_ingest.models import RecordCollection, VariantRecord

VCF_HEADER = (
    "##fileformat=VCFv4.2\n"
    "##contig=<ID=1,length=249250621>\n"
    '##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">\n'
    "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tSAMPLE\n"
)


def vcf_line(chrom: str, pos: int, ref: str, alt: str, vid: str = ".") -> str:
    """Format one VCF data line with a dummy genotype column."""
    return f"{chrom}\t{pos}\t{vid}\t{ref}\t{alt}\t50\tPASS\tDP=20\tGT\t0/1\n"


@pytest.fixture
def write_vcf(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a VCF with the given (chrom, pos, ref, alt) rows."""

    def _write(name: str, rows: list[tuple[str, int, str, str]]) -> Path:
        path = tmp_path / name
        path.write_text(VCF_HEADER + "".join(vcf_line(*row) for row in rows))
        return path

    return _write


@pytest.fixture
def sample_names() -> list[str]:
    return ["colon1", "intestine1", "liver1"]


@pytest.fixture
def sample_files(write_vcf: Callable[..., Path], sample_names: list[str]) -> list[Path]:
    """Three VCFs, each with one clean SNV and one deletion.

    The files use NCBI chromosome names so normalization to UCSC is visible.
    """
    return [
        write_vcf(
            f"{name}.vcf",
            [
                (str(i + 1), 1000 * (i + 1), "A", "G"),
                (str(i + 1), 2000 * (i + 1), "AT", "A"),
            ],
        )
        for i, name in enumerate(sample_names)
    ]


@pytest.fixture
def mixed_collection() -> RecordCollection:
    """Clean SNV, multi-allelic site, deletion and insertion, in that order."""
    return RecordCollection(
        source=Path("mixed.vcf"),
        records=[
            VariantRecord("1", 100, "A", ("G",), "snv"),
            VariantRecord("1", 200, "C", ("A", "T"), "multi"),
            VariantRecord("2", 300, "AT", ("A",), "del"),
            VariantRecord("chr3", 400, "G", ("GC",), "ins"),
        ],
    )
