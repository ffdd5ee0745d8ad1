"""
Batch VCF ingestion.

Loads per-sample VCF files in parallel, converts chromosome labels to one
naming style and keeps only biallelic single-nucleotide variants, returning
the results as a mapping from sample name to records.
"""

__version__ = "1.0.0"

from vcf_ingest.batch import ingest, worker_count
from vcf_ingest.errors import (
    ArgumentMismatch,
    DiscardedRecordsWarning,
    Removed,
    SourceReadFailure,
    UnsupportedStyle,
    VcfIngestError,
)
from vcf_ingest.legacy import read_vcf, rename_chrom, vcf_to_granges
from vcf_ingest.loader import load_one
from vcf_ingest.models import GenomeInfo, RecordCollection, SampleBatch, VariantRecord

__all__ = [
    "ingest",
    "load_one",
    "worker_count",
    "GenomeInfo",
    "RecordCollection",
    "SampleBatch",
    "VariantRecord",
    "ArgumentMismatch",
    "DiscardedRecordsWarning",
    "Removed",
    "SourceReadFailure",
    "UnsupportedStyle",
    "VcfIngestError",
    "read_vcf",
    "rename_chrom",
    "vcf_to_granges",
]
