"""Batch ingestion of per-sample VCF files.

Each file is loaded by its own worker (read, normalize chromosome names,
filter to biallelic SNVs). Results are gathered by input position, never by
completion order, so the i-th file always ends up under the i-th sample
name.
"""

import logging
import os
import warnings
from collections.abc import Sequence
from concurrent.futures import (
    FIRST_EXCEPTION,
    Executor,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    wait,
)
from pathlib import Path

from vcf_ingest.chromosomes import ChromosomeNormalizer, resolve_style
from vcf_ingest.config import EXECUTOR_KINDS, ExecutorKind, pairing_errors
from vcf_ingest.errors import ArgumentMismatch, DiscardedRecordsWarning
from vcf_ingest.loader import load_one
from vcf_ingest.models import GenomeInfo, LoadResult, SampleBatch
from vcf_ingest.sources import VariantSource

logger = logging.getLogger(__name__)

# Used when the CPU count cannot be determined (e.g. confined containers).
# One CPU is reserved for the calling process, leaving a single worker.
DEFAULT_CPU_BASIS = 2


def detect_cpu_count() -> int | None:
    """Number of CPUs on the machine, or None if it cannot be determined."""
    return os.cpu_count()


def worker_count(available: int | None = None) -> int:
    """Number of parallel workers to use.

    One CPU is left for the orchestrating process, with a floor of one
    worker.

    Args:
        available: CPU count; None means unknown and falls back to
            DEFAULT_CPU_BASIS

    Example:
        >>> worker_count(8)
        7
        >>> worker_count(None)
        1
    """
    basis = DEFAULT_CPU_BASIS if available is None else available
    return max(basis - 1, 1)


def _make_executor(kind: ExecutorKind, workers: int) -> Executor:
    if kind == "process":
        return ProcessPoolExecutor(max_workers=workers)
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="vcf-ingest")
    raise ValueError(f"Invalid executor '{kind}'. Valid options: {', '.join(EXECUTOR_KINDS)}")


def _gather(futures: list[Future]) -> list[LoadResult]:
    """Wait for all futures and return their results in submission order.

    On the first failure, queued tasks are cancelled and the exception of
    the earliest failed file is re-raised. Tasks already running are left
    to finish when the executor shuts down.
    """
    done, pending = wait(futures, return_when=FIRST_EXCEPTION)

    failed = [f for f in futures if f in done and f.exception() is not None]
    if failed:
        for future in pending:
            future.cancel()
        failed[0].result()

    return [future.result() for future in futures]


def ingest(
    vcf_files: Sequence[Path | str],
    sample_names: Sequence[str],
    genome: str | GenomeInfo = "-",
    style: str = "UCSC",
    *,
    max_workers: int | None = None,
    executor: ExecutorKind = "process",
    source: VariantSource | None = None,
    normalizer: ChromosomeNormalizer | None = None,
) -> SampleBatch:
    """Load VCF files into a SampleBatch keyed by sample name.

    Every file is read, its chromosome labels are converted to `style`, and
    records that are not biallelic SNVs are dropped. A
    DiscardedRecordsWarning is emitted for each file that lost records.

    Args:
        vcf_files: One variant file per sample
        sample_names: Sample names, parallel to vcf_files
        genome: Genome build name or GenomeInfo, passed to the source
        style: Chromosome naming style (default "UCSC")
        max_workers: Worker count override (default: available CPUs - 1)
        executor: "process" (default) or "thread"; use "thread" when
            `source` or `normalizer` cannot be pickled
        source: Record source (default: VcfRecordSource)
        normalizer: Chromosome normalizer (default: StyleNormalizer)

    Returns:
        SampleBatch whose keys are `sample_names`, in order

    Raises:
        ArgumentMismatch: If files and names do not pair up one to one
        SourceReadFailure: If any file cannot be read; no partial batch
            is returned
        UnsupportedStyle: If `style` is unknown
    """
    errors = pairing_errors(vcf_files, sample_names)
    if errors:
        raise ArgumentMismatch("; ".join(errors))
    if normalizer is None:
        resolve_style(style)
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1: {max_workers}")

    files = [Path(f) for f in vcf_files]
    names = list(sample_names)

    workers = max_workers if max_workers is not None else worker_count(detect_cpu_count())
    workers = min(workers, len(files))
    logger.info("Loading %d VCF file(s) with %d %s worker(s)", len(files), workers, executor)

    with _make_executor(executor, workers) as pool:
        futures = [
            pool.submit(load_one, path, genome, style, source, normalizer)
            for path in files
        ]
        results = _gather(futures)

    # Caller filters take precedence; repeat calls on the same files still warn
    with warnings.catch_warnings():
        warnings.simplefilter("always", DiscardedRecordsWarning, append=True)
        for name, path, result in zip(names, files, results):
            if result.discarded > 0:
                logger.warning("%s: removed %d non-SNV record(s)", name, result.discarded)
                warnings.warn(DiscardedRecordsWarning(path, result.discarded), stacklevel=2)

    batch = SampleBatch(names, [result.collection for result in results])
    logger.info("Loaded %d records for %d sample(s)", batch.total_records, len(batch))
    return batch
