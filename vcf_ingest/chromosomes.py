"""Chromosome naming styles.

Different reference distributions label the same chromosome differently:
UCSC uses "chr1", "chrX", "chrM" while NCBI and Ensembl use "1", "X", "MT".
StyleNormalizer rewrites the labels of a RecordCollection to one style so
that samples loaded from differently labelled files can be compared.
"""

import logging
from typing import Protocol, runtime_checkable

from vcf_ingest.errors import UnsupportedStyle
from vcf_ingest.models import RecordCollection

logger = logging.getLogger(__name__)

UCSC = "UCSC"
NCBI = "NCBI"
ENSEMBL = "Ensembl"

# Lower-cased style name -> canonical spelling
STYLES: dict[str, str] = {
    "ucsc": UCSC,
    "ncbi": NCBI,
    "ensembl": ENSEMBL,
}

SEX_CHROMOSOMES = {"X", "Y"}
MITO_ALIASES = {"M", "MT"}


@runtime_checkable
class ChromosomeNormalizer(Protocol):
    """Rewrites chromosome labels of a collection in place."""

    def apply(self, collection: RecordCollection, style: str) -> RecordCollection:
        ...


def resolve_style(style: str) -> str:
    """Return the canonical spelling of a naming style.

    Raises:
        UnsupportedStyle: If the style is unknown
    """
    try:
        return STYLES[style.lower()]
    except KeyError:
        raise UnsupportedStyle(
            f"Unknown chromosome naming style '{style}'. "
            f"Supported styles: {', '.join(STYLES.values())}"
        ) from None


def core_name(chrom: str) -> str | None:
    """Reduce a chromosome label to its style-free core.

    Strips any "chr" prefix and leading zeros. Returns None for labels that
    are not numbered, sex or mitochondrial chromosomes (unplaced contigs,
    decoys, HLA alleles).

    Example:
        >>> core_name("chr01")
        '1'
        >>> core_name("chrM")
        'MT'
        >>> core_name("GL000192.1") is None
        True
    """
    name = chrom[3:] if chrom.lower().startswith("chr") else chrom

    if name.isdigit():
        return str(int(name))

    upper = name.upper()
    if upper in SEX_CHROMOSOMES:
        return upper
    if upper in MITO_ALIASES:
        return "MT"
    return None


def rename_chromosome(chrom: str, style: str) -> str:
    """Rename a single chromosome label to `style`.

    Unrecognised labels are returned unchanged.

    Example:
        >>> rename_chromosome("1", "UCSC")
        'chr1'
        >>> rename_chromosome("chrM", "NCBI")
        'MT'
    """
    canonical = resolve_style(style)
    core = core_name(chrom)
    if core is None:
        return chrom

    if canonical == UCSC:
        return "chrM" if core == "MT" else f"chr{core}"
    return core


class StyleNormalizer:
    """Default normalizer for the UCSC, NCBI and Ensembl styles."""

    def apply(self, collection: RecordCollection, style: str) -> RecordCollection:
        resolve_style(style)

        # One lookup per distinct label rather than per record
        mapping = {chrom: rename_chromosome(chrom, style) for chrom in collection.seqnames()}
        for record in collection:
            record.chrom = mapping[record.chrom]

        renamed = sum(1 for old, new in mapping.items() if old != new)
        if renamed:
            logger.debug(
                "Renamed %d chromosome label(s) to %s style in %s",
                renamed,
                style,
                collection.source,
            )
        return collection
