"""Entry points that have been removed.

They keep their old signatures so existing callers get a clear error
pointing at the replacement instead of an AttributeError.
"""

from vcf_ingest.errors import Removed

READ_VCF_MESSAGE = (
    "This function has been removed.  Use 'ingest' instead.  The new function "
    "automatically renames the chromosome naming style for you, so you no "
    "longer need to run 'rename_chrom' either."
)


def read_vcf(vcf_files=None, sample_names=None, genome="-", style="UCSC"):
    """Removed; use `ingest`."""
    raise Removed(READ_VCF_MESSAGE)


def vcf_to_granges(vcf_files=None, sample_names=None, genome="-", style="UCSC"):
    """Removed; use `ingest`."""
    # Same message as read_vcf()
    read_vcf()


def rename_chrom(granges=None, style="UCSC"):
    """Removed; `ingest` renames chromosomes through its `style` argument."""
    raise Removed("This function has been removed.")
