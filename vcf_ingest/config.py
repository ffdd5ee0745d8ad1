"""Configuration for a batch ingestion run."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from vcf_ingest.chromosomes import STYLES
from vcf_ingest.models import GenomeInfo

ExecutorKind = Literal["process", "thread"]
EXECUTOR_KINDS: tuple[str, ...] = ("process", "thread")


def pairing_errors(vcf_files: Sequence[object], sample_names: Sequence[str]) -> list[str]:
    """Check that files and sample names can be paired one to one.

    Returns:
        List of error messages (empty if the inputs pair up)
    """
    errors: list[str] = []

    if len(vcf_files) != len(sample_names):
        errors.append(
            f"Provide the same number of sample names as VCF files "
            f"(got {len(sample_names)} names for {len(vcf_files)} files)"
        )
    if not vcf_files:
        errors.append("No VCF files given")

    seen: set[str] = set()
    duplicates: list[str] = []
    for name in sample_names:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        errors.append(f"Duplicate sample names: {', '.join(duplicates)}")

    return errors


@dataclass
class IngestConfig:
    """Settings for one call to ingest().

    Attributes:
        vcf_files: One variant file per sample
        sample_names: Sample names, parallel to vcf_files
        genome: Genome build name or GenomeInfo
        style: Chromosome naming style for all samples
        max_workers: Worker count override (default: available CPUs - 1)
        executor: "process" or "thread" worker pool
    """

    vcf_files: list[Path]
    sample_names: list[str]
    genome: str | GenomeInfo = "-"
    style: str = "UCSC"
    max_workers: int | None = None
    executor: ExecutorKind = "process"

    def __post_init__(self) -> None:
        self.vcf_files = [Path(f) for f in self.vcf_files]
        self.sample_names = list(self.sample_names)

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = pairing_errors(self.vcf_files, self.sample_names)

        for vcf_file in self.vcf_files:
            if not vcf_file.is_file():
                errors.append(f"VCF file not found: {vcf_file}")

        if self.style.lower() not in STYLES:
            errors.append(
                f"Unknown chromosome naming style '{self.style}'. "
                f"Valid options: {', '.join(STYLES.values())}"
            )

        if self.max_workers is not None and self.max_workers < 1:
            errors.append(f"max_workers must be at least 1: {self.max_workers}")

        if self.executor not in EXECUTOR_KINDS:
            errors.append(
                f"Invalid executor '{self.executor}'. "
                f"Valid options: {', '.join(EXECUTOR_KINDS)}"
            )

        return errors
