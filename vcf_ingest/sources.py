"""Variant record sources.

A source turns one file into a RecordCollection. The pipeline only depends
on the VariantSource protocol; VcfRecordSource is the default used when the
caller does not supply one.

VCF data lines (tab-separated, after the ## meta lines and #CHROM header):
#CHROM  POS     ID      REF     ALT     QUAL    FILTER  INFO    [FORMAT  samples...]
1       10177   rs367896724     A       AC      .       PASS    .

Only the first five columns are read.
"""

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from vcf_ingest.errors import SourceReadFailure
from vcf_ingest.io_utils import iter_data_lines
from vcf_ingest.models import GenomeInfo, RecordCollection, VariantRecord, genome_label

logger = logging.getLogger(__name__)

# CHROM, POS, ID, REF, ALT
MIN_COLUMNS = 5


@runtime_checkable
class VariantSource(Protocol):
    """Reads the variant records of one file."""

    def read(self, path: Path, genome: str | GenomeInfo) -> RecordCollection:
        """Return the records in `path`.

        Raises:
            SourceReadFailure: If the file is missing or malformed
        """
        ...


def parse_alts(alt_field: str) -> tuple[str, ...]:
    """Split a VCF ALT column.

    Example:
        >>> parse_alts("A,T")
        ('A', 'T')
        >>> parse_alts(".")
        ()
    """
    if alt_field == ".":
        return ()
    return tuple(allele.upper() for allele in alt_field.split(","))


class VcfRecordSource:
    """Streaming reader for plain or gzipped VCF files.

    When `genome` is a GenomeInfo every chromosome in the file must be one
    of its seqnames; a plain string is only used as the collection's build
    label.
    """

    def read(self, path: Path, genome: str | GenomeInfo = "-") -> RecordCollection:
        path = Path(path)
        if not path.is_file():
            raise SourceReadFailure(path, "file not found")

        allowed = genome if isinstance(genome, GenomeInfo) else None
        records: list[VariantRecord] = []

        try:
            for line_num, line in iter_data_lines(path):
                parts = line.split("\t")
                if len(parts) < MIN_COLUMNS:
                    raise SourceReadFailure(
                        path,
                        f"line {line_num}: expected at least {MIN_COLUMNS} columns, "
                        f"got {len(parts)}",
                    )

                chrom = parts[0]
                if allowed is not None and chrom not in allowed:
                    raise SourceReadFailure(
                        path,
                        f"line {line_num}: chromosome '{chrom}' is not in "
                        f"genome {allowed.genome}",
                    )

                try:
                    pos = int(parts[1])
                except ValueError:
                    raise SourceReadFailure(
                        path, f"line {line_num}: invalid position '{parts[1]}'"
                    ) from None

                records.append(
                    VariantRecord(
                        chrom=chrom,
                        pos=pos,
                        ref=parts[3].upper(),
                        alts=parse_alts(parts[4]),
                        id=parts[2],
                    )
                )
        except SourceReadFailure:
            raise
        except (OSError, UnicodeDecodeError, EOFError) as e:
            raise SourceReadFailure(path, str(e)) from e

        logger.debug("Read %d records from %s", len(records), path)
        return RecordCollection(source=path, genome=genome_label(genome), records=records)
