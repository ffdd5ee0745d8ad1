"""Transparent gzip handling for variant files.

VCFs arrive both plain and bgzip-compressed, often without a reliable
extension, so compression is detected from the file's magic bytes.

Example:
    with smart_open(Path("sample.vcf.gz")) as f:
        for line in f:
            process(line)
"""

import gzip
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO

# First two bytes of any gzip (and therefore bgzip) stream
GZIP_MAGIC = b"\x1f\x8b"


def is_gzipped(filepath: Path) -> bool:
    """Detect if a file is gzip-compressed.

    Reads the magic bytes; falls back to the ".gz" suffix when the file is
    shorter than two bytes.

    Args:
        filepath: Path to an existing file

    Returns:
        True if the file is gzip-compressed
    """
    with open(filepath, "rb") as f:
        magic = f.read(2)
    if len(magic) == 2:
        return magic == GZIP_MAGIC
    return filepath.suffix == ".gz"


@contextmanager
def smart_open(filepath: Path) -> Iterator[IO[str]]:
    """Open a plain or gzipped file for text reading.

    Args:
        filepath: Path to file (may be .gz or uncompressed)

    Yields:
        Text file handle (UTF-8)

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if is_gzipped(filepath):
        f = gzip.open(filepath, "rt", encoding="utf-8")
    else:
        f = open(filepath, "rt", encoding="utf-8")

    try:
        yield f
    finally:
        f.close()


def iter_data_lines(filepath: Path) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every non-header line of a VCF.

    Lines starting with "#" and blank lines are skipped. Line numbers are
    1-based and count every physical line, so they match what an editor
    shows.
    """
    with smart_open(filepath) as f:
        for line_num, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line or line.startswith("#"):
                continue
            yield line_num, line
