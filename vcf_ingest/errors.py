"""Exceptions and warnings raised by the VCF ingestion pipeline."""

from pathlib import Path


class VcfIngestError(Exception):
    """Base class for all vcf_ingest errors."""


class ArgumentMismatch(VcfIngestError, ValueError):
    """Raised when the file list and sample-name list cannot be paired.

    Covers differing lengths, duplicate sample names and an empty batch.
    Always raised before any file is opened.
    """


class Removed(VcfIngestError, RuntimeError):
    """Raised by entry points that no longer exist."""


class UnsupportedStyle(VcfIngestError, ValueError):
    """Raised when a chromosome naming style is not recognised."""


class SourceReadFailure(VcfIngestError, OSError):
    """Raised when a variant file cannot be read or parsed.

    Attributes:
        path: File that failed
        reason: Human readable cause
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")

    def __reduce__(self):
        # Keep the (path, reason) signature when crossing a process boundary
        return (type(self), (self.path, self.reason))


class DiscardedRecordsWarning(UserWarning):
    """Emitted once per file that lost records to the biallelic SNV filter.

    Attributes:
        path: File the records were removed from
        count: Number of records removed
    """

    def __init__(self, path: Path | str, count: int) -> None:
        self.path = Path(path)
        self.count = count
        super().__init__(
            f"{count} position(s) with indels and multiple alternative alleles "
            f"are removed from {self.path}."
        )
