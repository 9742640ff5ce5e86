"""Log file writer for run options and statistics."""

from pathlib import Path

from noisy_snp_filter.config import Config
from noisy_snp_filter.models import Statistics


def write_log_file(config: Config, stats: Statistics, log_path: Path | None = None) -> Path:
    """Write LOG file with run options and statistics.

    The LOG describes the latest run, so an existing one is always replaced
    regardless of the overwrite option.

    Args:
        config: Configuration used for the run
        stats: Statistics collected during processing
        log_path: Destination (default: config.log_file)

    Returns:
        Path to generated log file
    """
    log_path = log_path or config.log_file
    log_path.parent.mkdir(parents=True, exist_ok=True)

    with open(log_path, "w", encoding="utf-8") as f:
        f.write("Options Set:\n")
        f.write(f"Minimum coverage:            {config.cov_min}\n")
        f.write(f"Minimum homozygous ratio:    {config.homo_ratio_min}\n")
        f.write(f"Minimum sample ratio:        {config.sample_ratio_min}\n")
        f.write(f"SNP directory:               {config.snp_dir}\n")
        f.write(f"Output directory:            {config.output_dir}\n")
        f.write(f"Overwrite:                   {config.overwrite}\n")
        f.write("Genotype files:\n")
        for genotype_file in config.genotype_files:
            f.write(f"  {genotype_file}\n")
        f.write("\n")

        f.write("Observations\n")
        f.write(f" Files scored {stats.files_scored}\n")
        f.write(f" Total {stats.observations}\n")
        f.write(f" Homozygous {stats.homo_observations}\n")
        f.write(f" Heterozygous {stats.het_observations}\n")
        f.write(f" NA (coverage < {config.cov_min}) {stats.na_observations}\n\n")

        f.write("Positions\n")
        f.write(f" Scored {stats.positions_scored}\n")
        f.write(f" Kept {stats.positions_kept}\n")
        f.write(f" Discarded {stats.positions_discarded}\n\n")

        if stats.filter_results:
            f.write("Filtered call files\n")
            for result in stats.filter_results:
                f.write(f" {result.chr}\t{result.kept} kept\t{result.removed} removed\t{result.output_path}\n")
            f.write(f" Total lines kept {stats.lines_kept}\n")
            f.write(f" Total lines removed {stats.lines_removed}\n")

    return log_path


def print_summary(stats: Statistics) -> None:
    """Print summary statistics to stdout."""
    print("\nObservations")
    print(f" Total {stats.observations}")
    print(f" Homozygous {stats.homo_observations}")
    print(f" Heterozygous {stats.het_observations}")
    print(f" NA {stats.na_observations}")

    print("\nPositions")
    print(f" Kept {stats.positions_kept}")
    print(f" Discarded {stats.positions_discarded}")

    if stats.filter_results:
        print(f"\nCall file lines kept {stats.lines_kept}")
        print(f"Call file lines removed {stats.lines_removed}")
