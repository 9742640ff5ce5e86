"""Main orchestration for the noise filter.

Implements run_filter(), which scores every genotype table, decides which
positions to keep, and rewrites the per-chromosome SNP call files.
"""

import logging

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from noisy_snp_filter.config import Config
from noisy_snp_filter.exceptions import MissingInputError
from noisy_snp_filter.models import Statistics, TallyMap
from noisy_snp_filter.scoring import decide, score_files
from noisy_snp_filter.writers.call_files import check_output_path, filter_call_file
from noisy_snp_filter.writers.log import print_summary, write_log_file
from noisy_snp_filter.writers.scores import write_scores

logger = logging.getLogger(__name__)

console = Console()


def _progress(out: Console) -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=out,
    )


def score_population(config: Config, stats: Statistics, out: Console | None = None) -> TallyMap:
    """Score and decide every position in the configured genotype tables.

    Args:
        config: Configuration with genotype files and thresholds
        stats: Statistics to update
        out: Console for progress output

    Returns:
        Decided tally map
    """
    out = out or console

    with _progress(out) as progress:
        task = progress.add_task("Scoring genotypes...", total=len(config.genotype_files))
        tallies = score_files(
            config.genotype_files,
            cov_min=config.cov_min,
            homo_ratio_min=config.homo_ratio_min,
            stats=stats,
            on_file_done=lambda _path: progress.advance(task),
        )

    decide(tallies, config.sample_ratio_min, stats)
    return tallies


def chromosomes_to_filter(config: Config, tallies: TallyMap) -> list[str]:
    """Configured chromosome subset, or every scored chromosome."""
    return list(config.chromosomes) if config.chromosomes else tallies.chromosomes


def check_call_files(config: Config, chromosomes: list[str]) -> None:
    """Check each chromosome's call file exists and its output is free.

    Raises:
        MissingInputError: If a chromosome's call file doesn't exist
        OutputConflictError: If a filtered file exists and overwrite is off
    """
    for chr_val in chromosomes:
        call_file = config.call_file_for(chr_val)
        if not call_file.is_file():
            raise MissingInputError(f"SNP call file not found for {chr_val}: {call_file}")
        check_output_path(config.output_file_for(chr_val), config.overwrite)


def check_outputs(config: Config, chromosomes: list[str]) -> None:
    """Check every input and output of the writing steps up front.

    Covers the score table and, unless scoring only, each chromosome's call
    file and filtered output. Nothing has been written when this raises.

    Raises:
        MissingInputError: If a chromosome's call file doesn't exist
        OutputConflictError: If an output exists and overwrite is off
    """
    if config.scores_file is not None:
        check_output_path(config.scores_file, config.overwrite)

    if not config.scores_only:
        check_call_files(config, chromosomes)


def filter_population(
    config: Config,
    tallies: TallyMap,
    stats: Statistics,
    out: Console | None = None,
) -> None:
    """Rewrite the call file of each chromosome using the keep decisions.

    Every call file and output path is checked before anything is written,
    so a missing input or an existing output aborts without partial output.

    Raises:
        MissingInputError: If a chromosome's call file doesn't exist
        OutputConflictError: If a filtered file exists and overwrite is off
    """
    out = out or console
    chromosomes = chromosomes_to_filter(config, tallies)
    check_call_files(config, chromosomes)

    with _progress(out) as progress:
        task = progress.add_task("Filtering call files...", total=len(chromosomes))
        for chr_val in chromosomes:
            result = filter_call_file(
                chr_val,
                tallies,
                config.call_file_for(chr_val),
                config.output_file_for(chr_val),
                overwrite=config.overwrite,
            )
            stats.filter_results.append(result)
            progress.advance(task)


def run_filter(config: Config, out: Console | None = None) -> Statistics:
    """Run the full noise-reduction pipeline.

    1. Score each genotype table and aggregate per position
    2. Decide keep/discard per position
    3. Check every output for conflicts before writing any of them
    4. Write the score table (if requested)
    5. Rewrite per-chromosome call files (unless scores_only)
    6. Write the LOG file (always replaced) and print a summary

    Args:
        config: Run configuration
        out: Console for progress output

    Returns:
        Statistics for the run

    Raises:
        MissingInputError: If a genotype table or call file is missing
        MalformedInputError: If a genotype line is invalid
        OutputConflictError: If an output exists and overwrite is off
    """
    out = out or console
    stats = Statistics()

    out.print(f"Scoring {len(config.genotype_files)} genotype file(s)")
    tallies = score_population(config, stats, out)
    out.print(
        f"Scored {stats.positions_scored:,} positions: "
        f"{stats.positions_kept:,} kept, {stats.positions_discarded:,} discarded\n"
    )

    check_outputs(config, chromosomes_to_filter(config, tallies))

    if config.scores_file is not None:
        rows = write_scores(tallies, config.scores_file, overwrite=config.overwrite)
        logger.info("Wrote %d rows to %s", rows, config.scores_file)

    if config.scores_only:
        logger.info("Scoring only; call files left untouched")
    else:
        filter_population(config, tallies, stats, out)

    log_path = write_log_file(config, stats)

    print_summary(stats)

    out.print("\n[bold]Output files generated:[/bold]")
    if config.scores_file is not None:
        out.print(f"  Score table:        {config.scores_file}")
    for result in stats.filter_results:
        out.print(f"  {result.output_path}")
    out.print(f"\n  Log file:           {log_path}")
    out.print("\n[green]Noise reduction complete![/green]\n")

    return stats
