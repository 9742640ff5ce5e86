"""Per-position score table writer.

One row per scored position, sorted by chromosome then position:
chr  pos   homo  het  NA  sample_ratio  keep
A01  1042  9     1    2   0.9000        1
"""

from pathlib import Path

from noisy_snp_filter.exceptions import OutputConflictError
from noisy_snp_filter.models import TallyMap

SCORE_COLUMNS = ("chr", "pos", "homo", "het", "NA", "sample_ratio", "keep")


def write_scores(tallies: TallyMap, output_path: Path, overwrite: bool = False) -> int:
    """Write the score table for a decided tally map.

    Args:
        tallies: Tally map (decided or not; undecided cells are written as NA)
        output_path: Destination TSV
        overwrite: Replace output_path if it exists

    Returns:
        Number of rows written

    Raises:
        OutputConflictError: If output_path exists and overwrite is False
    """
    if output_path.exists() and not overwrite:
        raise OutputConflictError(f"Score file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    rows = 0
    with open(output_path, "w", encoding="utf-8") as f:
        f.write("\t".join(SCORE_COLUMNS) + "\n")
        for chr_val, pos_key, tally in tallies.items():
            sample_ratio = "NA" if tally.sample_ratio is None else f"{tally.sample_ratio:.4f}"
            keep = "NA" if tally.keep is None else str(int(tally.keep))
            f.write(
                f"{chr_val}\t{pos_key}\t{tally.homo}\t{tally.het}\t{tally.na}"
                f"\t{sample_ratio}\t{keep}\n"
            )
            rows += 1

    return rows
