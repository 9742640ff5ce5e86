"""Population-wide scoring of positions.

The aggregator is a counting fold: each observation is classified and the
count for its class is incremented at its (chromosome, position) key. The
order of observations and of input files does not change the result.

The decider then keeps a position when the fraction of scored samples
(homo + het; NA is ignored) that are homozygous reaches sample_ratio_min.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from noisy_snp_filter.models import Observation, Statistics, TallyMap
from noisy_snp_filter.parsers.genotype import parse_genotype_file
from noisy_snp_filter.scoring.zygosity import DEFAULT_COV_MIN, DEFAULT_HOMO_RATIO_MIN, classify
from noisy_snp_filter.utils import normalize_position_key, ratio

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_RATIO_MIN = 0.9


def aggregate(
    observations: Iterable[Observation],
    cov_min: int = DEFAULT_COV_MIN,
    homo_ratio_min: float = DEFAULT_HOMO_RATIO_MIN,
    tallies: TallyMap | None = None,
    stats: Statistics | None = None,
) -> TallyMap:
    """Fold observations into per-position zygosity counts.

    Args:
        observations: Observations from any number of samples
        cov_min: Minimum coverage to attempt a call
        homo_ratio_min: Minimum major-allele fraction to call homozygous
        tallies: Existing map to add to (a new one is created if None)
        stats: Optional statistics to update

    Returns:
        The tally map (same object as `tallies` when given)
    """
    if tallies is None:
        tallies = TallyMap()

    for obs in observations:
        zygosity = classify(
            obs.allele1_count,
            obs.allele2_count,
            obs.total_count,
            cov_min,
            homo_ratio_min,
        )
        tallies.tally(obs.chr, normalize_position_key(obs.pos)).add(zygosity)
        if stats is not None:
            stats.record(zygosity)

    return tallies


def score_files(
    genotype_files: Sequence[Path],
    cov_min: int = DEFAULT_COV_MIN,
    homo_ratio_min: float = DEFAULT_HOMO_RATIO_MIN,
    stats: Statistics | None = None,
    on_file_done: Callable[[Path], None] | None = None,
) -> TallyMap:
    """Aggregate every observation of every genotype table.

    A malformed line anywhere aborts scoring; no partial map is returned.

    Args:
        genotype_files: Genotype tables, one per sample or pooled
        cov_min: Minimum coverage to attempt a call
        homo_ratio_min: Minimum major-allele fraction to call homozygous
        stats: Optional statistics to update
        on_file_done: Called with each path once it has been consumed

    Returns:
        Tally map for all files

    Raises:
        MissingInputError: If a genotype table can't be opened
        MalformedInputError: On the first invalid line
    """
    tallies = TallyMap()

    for genotype_file in genotype_files:
        logger.info("Scoring %s", genotype_file)
        aggregate(
            parse_genotype_file(genotype_file),
            cov_min=cov_min,
            homo_ratio_min=homo_ratio_min,
            tallies=tallies,
            stats=stats,
        )
        if stats is not None:
            stats.files_scored += 1
        if on_file_done is not None:
            on_file_done(genotype_file)

    logger.info("Scored %d positions across %d chromosomes", len(tallies), len(tallies.chromosomes))
    return tallies


def decide(
    tallies: TallyMap,
    sample_ratio_min: float = DEFAULT_SAMPLE_RATIO_MIN,
    stats: Statistics | None = None,
) -> TallyMap:
    """Set `sample_ratio` and `keep` on every tally, in place.

    sample_ratio = homo / (homo + het), or 0 when no sample was scored.
    A position is kept when sample_ratio >= sample_ratio_min.

    Args:
        tallies: Map built by aggregate()
        sample_ratio_min: Minimum homozygous-sample fraction to keep a position
        stats: Optional statistics; its position counts are reset, then set

    Returns:
        The same tally map
    """
    if stats is not None:
        stats.positions_kept = 0
        stats.positions_discarded = 0

    for _chr, _pos, tally in tallies.items():
        tally.sample_ratio = ratio(tally.homo, tally.total_scored)
        tally.keep = tally.sample_ratio >= sample_ratio_min

        if stats is not None:
            if tally.keep:
                stats.positions_kept += 1
            else:
                stats.positions_discarded += 1

    return tallies


def keep_decisions(tallies: TallyMap) -> dict[str, dict[str, bool]]:
    """Chromosome -> position -> keep, for a decided tally map.

    Raises:
        ValueError: If decide() has not been run on the map
    """
    decisions: dict[str, dict[str, bool]] = {}
    for chr_val, pos_key, tally in tallies.items():
        if tally.keep is None:
            raise ValueError(f"No keep decision for {chr_val}:{pos_key}; run decide() first")
        decisions.setdefault(chr_val, {})[pos_key] = tally.keep
    return decisions
