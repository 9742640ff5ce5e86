"""I/O utilities for genotype tables and SNP call files.

Genotype tables are often shipped gzipped; compression is detected from the
magic bytes so plain and compressed inputs can be mixed in one run.

Example:
    with smart_open(Path("RIL_1.genotyped.gz")) as f:
        for line in f:
            process(line)
"""

import gzip
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from noisy_snp_filter.exceptions import MissingInputError

# Gzip magic bytes (first two bytes of gzip file)
GZIP_MAGIC = b"\x1f\x8b"


def is_gzipped(filepath: Path) -> bool:
    """Detect if a file is gzip-compressed by its magic bytes.

    Args:
        filepath: Path to file to check

    Returns:
        True if file starts with the gzip magic bytes
    """
    with open(filepath, "rb") as f:
        return f.read(2) == GZIP_MAGIC


@contextmanager
def smart_open(filepath: Path) -> Iterator[IO[str]]:
    """Open a text file for reading, transparently handling gzip.

    Args:
        filepath: Path to file (may be gzipped)

    Yields:
        Text file handle

    Raises:
        MissingInputError: If the file doesn't exist or can't be opened
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise MissingInputError(f"Input file not found: {filepath}")

    try:
        if is_gzipped(filepath):
            f = gzip.open(filepath, "rt", encoding="utf-8", newline="")
        else:
            f = open(filepath, "r", encoding="utf-8", newline="")
    except OSError as e:
        raise MissingInputError(f"Cannot open {filepath}: {e}") from e

    try:
        yield f
    finally:
        f.close()


def iter_lines(filepath: Path) -> Iterator[str]:
    """Iterate over lines in a file, stripped of trailing newlines.

    Args:
        filepath: Path to file (may be gzipped)

    Yields:
        Lines without the trailing newline (or carriage return)
    """
    with smart_open(filepath) as f:
        for line in f:
            yield line.rstrip("\r\n")
