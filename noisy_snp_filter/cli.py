"""Typer CLI for the noise filter.

Usage:
    # Score RIL genotype tables and filter call files in ./snps
    filter-noisy-snps RIL_*.genotyped --snp-dir snps

    # Stricter homozygosity call, write score table only
    filter-noisy-snps RIL_*.genotyped --homo-ratio-min 0.95 --scores-only --scores-file scores.tsv
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from noisy_snp_filter import __version__

app = typer.Typer(
    name="filter-noisy-snps",
    help="Remove SNP positions with population-wide excess heterozygosity",
    add_completion=False,
)

console = Console()


@app.command()
def filter_snps(
    genotype_files: Annotated[
        list[Path],
        typer.Argument(
            help="Genotype tables (chr pos allele1 allele2 total), one per sample or pooled",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    snp_dir: Annotated[
        Path | None,
        typer.Option(
            "--snp-dir", "-s",
            help="Directory of per-chromosome SNP call files",
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    out_dir: Annotated[
        Path | None,
        typer.Option(
            "--out-dir", "-o",
            help="Output directory (default: --snp-dir)",
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    cov_min: Annotated[
        int,
        typer.Option(
            "--cov-min",
            help="Minimum coverage to call zygosity (default: 3)",
            min=0,
        ),
    ] = 3,
    homo_ratio_min: Annotated[
        float,
        typer.Option(
            "--homo-ratio-min",
            help="Minimum major-allele fraction to call homozygous (default: 0.9)",
            min=0.0,
            max=1.0,
        ),
    ] = 0.9,
    sample_ratio_min: Annotated[
        float,
        typer.Option(
            "--sample-ratio-min",
            help="Minimum homozygous-sample fraction to keep a position (default: 0.9)",
            min=0.0,
            max=1.0,
        ),
    ] = 0.9,
    prefix: Annotated[
        str,
        typer.Option("--prefix", help="Call file name prefix before the chromosome"),
    ] = "polyDB.",
    suffix: Annotated[
        str,
        typer.Option("--suffix", help="Call file name suffix after the chromosome"),
    ] = ".nr",
    output_suffix: Annotated[
        str,
        typer.Option("--output-suffix", help="Extension added to filtered call files"),
    ] = "pop-filtered",
    chromosomes: Annotated[
        list[str] | None,
        typer.Option(
            "--chr",
            help="Only filter this chromosome (repeatable; default: all scored)",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing output files"),
    ] = False,
    scores_only: Annotated[
        bool,
        typer.Option("--scores-only", help="Score positions without filtering call files"),
    ] = False,
    scores_file: Annotated[
        Path | None,
        typer.Option(
            "--scores-file",
            help="Write per-position homo/het/NA counts and decisions to this TSV",
            dir_okay=False,
        ),
    ] = None,
    log_dir: Annotated[
        Path | None,
        typer.Option("--log-dir", help="Write a rotating debug log under DIR/logs"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Flag and remove noisy SNP positions in a single-parent population.

    Each genotype observation is classified homozygous, heterozygous or NA
    (coverage below --cov-min). Positions where fewer than --sample-ratio-min
    of the scored samples are homozygous are removed from each chromosome's
    SNP call file.
    """
    from noisy_snp_filter.config import Config
    from noisy_snp_filter.logging_config import setup_logging
    from noisy_snp_filter.main import run_filter

    console.print("\n")
    console.print("[bold]Population SNP Noise Filter[/bold]", style="blue")
    console.print(f"v{__version__}\n")

    log_file = setup_logging(log_dir=log_dir, verbose=verbose)

    config = Config(
        genotype_files=genotype_files,
        snp_dir=snp_dir,
        output_dir=out_dir,
        cov_min=cov_min,
        homo_ratio_min=homo_ratio_min,
        sample_ratio_min=sample_ratio_min,
        overwrite=force,
        call_file_prefix=prefix,
        call_file_suffix=suffix,
        output_suffix=output_suffix,
        chromosomes=chromosomes or None,
        scores_only=scores_only,
        scores_file=scores_file,
        log_dir=log_dir,
        verbose=verbose,
    )

    console.print("Options Set:")
    console.print(f"Minimum coverage:            {config.cov_min}")
    console.print(f"Minimum homozygous ratio:    {config.homo_ratio_min}")
    console.print(f"Minimum sample ratio:        {config.sample_ratio_min}")
    console.print(f"Genotype files:              {len(config.genotype_files)}")
    if not config.scores_only:
        console.print(f"SNP directory:               {config.snp_dir}")
        console.print(f"Output directory:            {config.output_dir}")
    if config.overwrite:
        console.print("Overwrite flag set")
    if log_file:
        console.print(f"Debug log:                   {log_file}")
    console.print("")

    errors = config.validate()
    if errors:
        for error in errors:
            console.print(f"[red]ERROR:[/red] {error}")
        raise typer.Exit(code=1)

    if out_dir is not None:
        out_dir.mkdir(parents=True, exist_ok=True)

    try:
        run_filter(config, out=console)
    except Exception as e:
        console.print(f"[red]ERROR:[/red] {e}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
