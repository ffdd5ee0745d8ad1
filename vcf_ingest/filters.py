"""Biallelic SNV filter.

Removes every record that is not a single-nucleotide substitution with
exactly one alternate allele: multi-allelic sites, insertions, deletions,
and alleles with symbols outside A/C/G/T (N, "*", "<DEL>", ...).
"""

from vcf_ingest.models import FilterResult, RecordCollection, VariantRecord

DNA_BASES = frozenset("ACGT")


def is_snv_allele(allele: str) -> bool:
    """Check that an allele is exactly one of A, C, G or T."""
    return len(allele) == 1 and allele in DNA_BASES


def is_biallelic_snv(record: VariantRecord) -> bool:
    """Check if a record is a biallelic single-nucleotide variant.

    Args:
        record: Variant record

    Returns:
        True if the record has one ALT and both REF and ALT are single bases

    Example:
        >>> is_biallelic_snv(VariantRecord("chr1", 100, "A", ("G",)))
        True
        >>> is_biallelic_snv(VariantRecord("chr1", 100, "A", ("G", "T")))
        False
        >>> is_biallelic_snv(VariantRecord("chr1", 100, "AT", ("A",)))
        False
    """
    return (
        len(record.alts) == 1
        and is_snv_allele(record.alts[0])
        and is_snv_allele(record.ref)
    )


def filter_biallelic_snvs(collection: RecordCollection) -> FilterResult:
    """Keep only biallelic SNVs, preserving record order.

    Never raises; the caller decides how to report the removed count.

    Args:
        collection: Records from one file

    Returns:
        FilterResult with the kept collection and the number removed
    """
    kept = collection.derive(record for record in collection if is_biallelic_snv(record))
    return FilterResult(kept=kept, removed=len(collection) - len(kept))
