"""Data models for the VCF ingestion pipeline.

Records keep only positional and allele fields; genotype and INFO columns
never reach these structures.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import overload

import pandas as pd


@dataclass(slots=True)
class VariantRecord:
    """One variant position in one sample.

    Attributes:
        chrom: Chromosome label (rewritten in place by the normalizer)
        pos: 1-based position
        ref: Reference allele
        alts: Alternate alleles, in file order (empty when ALT is ".")
        id: Variant identifier from the ID column
    """

    chrom: str
    pos: int
    ref: str
    alts: tuple[str, ...]
    id: str = "."


@dataclass(frozen=True)
class GenomeInfo:
    """Reference sequence description, passed in place of a genome name.

    Attributes:
        genome: Build name (e.g. "hg19")
        seqnames: Chromosome labels the files are allowed to use
        seqlengths: Optional lengths, parallel to seqnames
    """

    genome: str
    seqnames: tuple[str, ...]
    seqlengths: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        if self.seqlengths is not None and len(self.seqlengths) != len(self.seqnames):
            raise ValueError(
                f"seqlengths has {len(self.seqlengths)} entries, "
                f"expected {len(self.seqnames)}"
            )

    def __contains__(self, chrom: object) -> bool:
        return chrom in self.seqnames


def genome_label(genome: "str | GenomeInfo") -> str:
    """Return the build name for either form of genome argument."""
    if isinstance(genome, GenomeInfo):
        return genome.genome
    return genome


@dataclass
class RecordCollection(Sequence):
    """Ordered variant records read from one file.

    Attributes:
        source: File the records came from
        genome: Genome build label
        records: Records in file order
    """

    source: Path
    genome: str = "-"
    records: list[VariantRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[VariantRecord]:
        return iter(self.records)

    @overload
    def __getitem__(self, index: int) -> VariantRecord: ...

    @overload
    def __getitem__(self, index: slice) -> "RecordCollection": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.derive(self.records[index])
        return self.records[index]

    def derive(self, records: Iterable[VariantRecord]) -> "RecordCollection":
        """Build a collection with the same origin holding other records."""
        return RecordCollection(source=self.source, genome=self.genome, records=list(records))

    def seqnames(self) -> list[str]:
        """Distinct chromosome labels, in first-seen order."""
        return list(dict.fromkeys(record.chrom for record in self.records))


@dataclass(frozen=True)
class FilterResult:
    """Outcome of the biallelic SNV filter."""

    kept: RecordCollection
    removed: int


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one file."""

    collection: RecordCollection
    discarded: int


class SampleBatch(Mapping[str, RecordCollection]):
    """Read-only mapping of sample name to that sample's cleaned records.

    Iteration order is the order of the sample names given at construction.
    """

    __slots__ = ("_data",)

    def __init__(self, sample_names: Sequence[str], collections: Sequence[RecordCollection]) -> None:
        if len(sample_names) != len(collections):
            raise ValueError(
                f"Got {len(sample_names)} sample names for {len(collections)} collections"
            )
        self._data: dict[str, RecordCollection] = dict(zip(sample_names, collections))
        if len(self._data) != len(sample_names):
            raise ValueError("Sample names must be unique")

    def __getitem__(self, name: str) -> RecordCollection:
        return self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{name}={len(coll)}" for name, coll in self._data.items())
        return f"SampleBatch({sizes})"

    @property
    def total_records(self) -> int:
        """Number of records across all samples."""
        return sum(len(coll) for coll in self._data.values())

    def to_frame(self) -> pd.DataFrame:
        """Flatten the batch into one row per record.

        Columns: sample, chrom, pos, id, ref, alt. ALT alleles are joined
        with "," so unfiltered collections are representable too.
        """
        rows = [
            {
                "sample": name,
                "chrom": record.chrom,
                "pos": record.pos,
                "id": record.id,
                "ref": record.ref,
                "alt": ",".join(record.alts),
            }
            for name, coll in self._data.items()
            for record in coll
        ]
        return pd.DataFrame(rows, columns=["sample", "chrom", "pos", "id", "ref", "alt"])
