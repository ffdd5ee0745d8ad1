"""Single-file loading: read, normalize chromosome names, filter."""

import logging
from pathlib import Path

from vcf_ingest.chromosomes import ChromosomeNormalizer, StyleNormalizer
from vcf_ingest.filters import filter_biallelic_snvs
from vcf_ingest.models import GenomeInfo, LoadResult
from vcf_ingest.sources import VariantSource, VcfRecordSource

logger = logging.getLogger(__name__)


def load_one(
    path: Path | str,
    genome: str | GenomeInfo = "-",
    style: str = "UCSC",
    source: VariantSource | None = None,
    normalizer: ChromosomeNormalizer | None = None,
) -> LoadResult:
    """Load one variant file into a cleaned record collection.

    Steps:
    1. Read positional and allele fields through `source`
    2. Rewrite chromosome labels to `style` through `normalizer`
    3. Drop everything that is not a biallelic SNV

    Args:
        path: Variant file
        genome: Genome build name or GenomeInfo, passed to the source
        style: Chromosome naming style, passed to the normalizer
        source: Record source (default: VcfRecordSource)
        normalizer: Chromosome normalizer (default: StyleNormalizer)

    Returns:
        LoadResult with the kept records and the number discarded

    Raises:
        SourceReadFailure: If the source cannot read the file
        UnsupportedStyle: If the normalizer does not know `style`
    """
    source = source or VcfRecordSource()
    normalizer = normalizer or StyleNormalizer()

    collection = source.read(Path(path), genome)
    normalizer.apply(collection, style)
    result = filter_biallelic_snvs(collection)

    logger.debug(
        "%s: kept %d of %d records", path, len(result.kept), len(collection)
    )
    return LoadResult(collection=result.kept, discarded=result.removed)
