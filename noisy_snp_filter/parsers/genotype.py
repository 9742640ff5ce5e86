"""Genotype table parser.

Streams per-sample allele counts with strict validation. Every numeric
field must be a non-negative integer; anything else aborts the run.

Genotype table format (whitespace-separated, no header):
chromosome  position  allele1_count  allele2_count  total_count
A01         1042      9              1              10
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from noisy_snp_filter.exceptions import MalformedInputError
from noisy_snp_filter.io_utils import iter_lines
from noisy_snp_filter.models import Observation
from noisy_snp_filter.utils import parse_count

logger = logging.getLogger(__name__)

GENOTYPE_FIELDS = ("position", "allele1_count", "allele2_count", "total_count")


def parse_genotype_line(line: str, filepath: Path | None = None, line_num: int | None = None) -> Observation:
    """Parse one genotype table line.

    Args:
        line: Raw line (trailing newline optional)
        filepath: Source file, for error messages
        line_num: 1-based line number, for error messages

    Returns:
        Observation for the line

    Raises:
        MalformedInputError: If the line doesn't have exactly five fields or
            a numeric field is not a non-negative integer
    """
    parts = line.split()
    if len(parts) != 5:
        raise MalformedInputError(
            f"expected 5 whitespace-delimited fields, got {len(parts)}",
            filepath,
            line_num,
        )

    values: list[int] = []
    for name, raw in zip(GENOTYPE_FIELDS, parts[1:]):
        value = parse_count(raw)
        if value is None:
            raise MalformedInputError(
                f"{name} must be a non-negative integer, got {raw!r}",
                filepath,
                line_num,
            )
        values.append(value)

    pos, allele1_count, allele2_count, total_count = values
    return Observation(
        chr=parts[0],
        pos=pos,
        allele1_count=allele1_count,
        allele2_count=allele2_count,
        total_count=total_count,
    )


def parse_genotype_file(filepath: Path) -> Iterator[Observation]:
    """Stream observations from a genotype table.

    Blank lines are skipped. The file may be gzipped.

    Args:
        filepath: Path to genotype table

    Yields:
        Observation for each data line

    Raises:
        MissingInputError: If the file doesn't exist
        MalformedInputError: On the first invalid line

    Example:
        >>> for obs in parse_genotype_file(Path("RIL_1.genotyped")):
        ...     print(obs.chr, obs.pos)
    """
    filepath = Path(filepath)
    logger.debug("Parsing genotype table %s", filepath)

    for line_num, line in enumerate(iter_lines(filepath), 1):
        if not line.strip():
            continue
        yield parse_genotype_line(line, filepath, line_num)
