"""Per-chromosome SNP call file rewriter.

Call file format (tab-separated, one header line):
chr   pos     ref_base  snp_base  ...
A01   1042    A         G         ...
A01   1042.1  -         T         ...

Data lines are copied verbatim when their position is kept; the header is
always copied. A position with an insertion suffix ("1042.1") is looked up
under its integer part.
"""

import logging
import shutil
import tempfile
from pathlib import Path

from noisy_snp_filter.exceptions import MalformedInputError, OutputConflictError
from noisy_snp_filter.io_utils import smart_open
from noisy_snp_filter.models import FilterResult, TallyMap
from noisy_snp_filter.utils import normalize_position_key

logger = logging.getLogger(__name__)


def check_output_path(output_path: Path, overwrite: bool = False) -> None:
    """Raise if an output file exists and may not be replaced.

    Raises:
        OutputConflictError: If output_path exists and overwrite is False
    """
    if output_path.exists() and not overwrite:
        raise OutputConflictError(
            f"Output file already exists: {output_path} (use --force to overwrite)"
        )


def is_kept(tallies: TallyMap, chr_val: str, position: str) -> bool:
    """Keep decision for a call file position (False when never scored)."""
    tally = tallies.get(chr_val, normalize_position_key(position))
    return bool(tally is not None and tally.keep)


def filter_call_file(
    chr_val: str,
    tallies: TallyMap,
    input_path: Path,
    output_path: Path,
    overwrite: bool = False,
) -> FilterResult:
    """Write the lines of a call file whose positions are kept.

    Output is written to a temporary file in the output directory and
    renamed on success, so a failure never leaves a partial filtered file.
    The filtered file gets the permission bits of the input call file.

    Args:
        chr_val: Chromosome the call file belongs to
        tallies: Decided tally map
        input_path: SNP call file (may be gzipped)
        output_path: Filtered call file to write (plain text)
        overwrite: Replace output_path if it exists

    Returns:
        FilterResult with kept/removed line counts

    Raises:
        OutputConflictError: If output_path exists and overwrite is False
        MissingInputError: If input_path doesn't exist
        MalformedInputError: If a data line has no position field
    """
    check_output_path(output_path, overwrite)

    result = FilterResult(chr=chr_val, input_path=str(input_path), output_path=str(output_path))
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with smart_open(input_path) as f_in:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=output_path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
            newline="",
        ) as tmp:
            tmp_path = Path(tmp.name)
            try:
                # Header is opaque
                tmp.write(f_in.readline())

                for line_num, line in enumerate(f_in, 2):
                    if not line.strip():
                        continue

                    fields = line.split("\t", 2)
                    if len(fields) < 2:
                        raise MalformedInputError(
                            "expected a tab-delimited position in field 2",
                            input_path,
                            line_num,
                        )

                    if is_kept(tallies, chr_val, fields[1]):
                        tmp.write(line)
                        result.kept += 1
                    else:
                        result.removed += 1
            except BaseException:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise

    # NamedTemporaryFile is owner-only; match the input call file instead
    shutil.copymode(input_path, tmp_path)
    tmp_path.replace(output_path)

    logger.info(
        "%s: kept %d, removed %d lines -> %s",
        chr_val,
        result.kept,
        result.removed,
        output_path,
    )
    return result
