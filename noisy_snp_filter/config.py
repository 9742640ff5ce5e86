"""Configuration dataclass for the noise filter."""

from dataclasses import dataclass, field
from pathlib import Path

from noisy_snp_filter.scoring.tally import DEFAULT_SAMPLE_RATIO_MIN
from noisy_snp_filter.scoring.zygosity import DEFAULT_COV_MIN, DEFAULT_HOMO_RATIO_MIN


@dataclass
class Config:
    """Configuration for a population noise-reduction run.

    Attributes:
        genotype_files: Genotype tables to score (one per sample or pooled)
        snp_dir: Directory holding per-chromosome SNP call files
        output_dir: Directory for filtered call files (default: snp_dir)
        cov_min: Minimum coverage to attempt a zygosity call
        homo_ratio_min: Minimum major-allele fraction to call homozygous
        sample_ratio_min: Minimum homozygous-sample fraction to keep a position
        overwrite: Replace existing filtered files
        call_file_prefix: Call file name prefix before the chromosome
        call_file_suffix: Call file name suffix after the chromosome
        output_suffix: Extension appended to the call file name for output
        chromosomes: Restrict rewriting to these chromosomes (None: all scored)
        scores_only: Score and decide without rewriting call files
        scores_file: Write the per-position score table here
        log_dir: Directory for the rotating debug log (None: no log file)
        verbose: Enable verbose logging
    """

    genotype_files: list[Path]
    snp_dir: Path | None = None
    output_dir: Path | None = None

    # Thresholds
    cov_min: int = DEFAULT_COV_MIN
    homo_ratio_min: float = DEFAULT_HOMO_RATIO_MIN
    sample_ratio_min: float = DEFAULT_SAMPLE_RATIO_MIN

    # Output naming
    overwrite: bool = False
    call_file_prefix: str = "polyDB."
    call_file_suffix: str = ".nr"
    output_suffix: str = "pop-filtered"

    # Behavior flags
    chromosomes: list[str] | None = None
    scores_only: bool = False
    scores_file: Path | None = None
    log_dir: Path | None = None
    verbose: bool = False

    # Run log written next to the filtered files
    log_name: str = field(default="LOG-noise-filter.txt")

    def __post_init__(self) -> None:
        """Coerce paths and set defaults."""
        self.genotype_files = [Path(p) for p in self.genotype_files]

        if isinstance(self.snp_dir, str):
            self.snp_dir = Path(self.snp_dir)

        if self.output_dir is None:
            self.output_dir = self.snp_dir if self.snp_dir is not None else Path.cwd()
        elif isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)

        if isinstance(self.scores_file, str):
            self.scores_file = Path(self.scores_file)
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)

    def call_file_for(self, chr_val: str) -> Path:
        """Path of the SNP call file for a chromosome.

        Example:
            >>> Config([], snp_dir=Path("snps")).call_file_for("A01")
            PosixPath('snps/polyDB.A01.nr')
        """
        assert self.snp_dir is not None
        return self.snp_dir / f"{self.call_file_prefix}{chr_val}{self.call_file_suffix}"

    def output_file_for(self, chr_val: str) -> Path:
        """Path of the filtered call file for a chromosome."""
        assert self.output_dir is not None  # Set in __post_init__
        return self.output_dir / f"{self.call_file_for(chr_val).name}.{self.output_suffix}"

    @property
    def log_file(self) -> Path:
        assert self.output_dir is not None
        return self.output_dir / self.log_name

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []

        if not self.genotype_files:
            errors.append("No genotype files given")

        for genotype_file in self.genotype_files:
            if not genotype_file.is_file():
                errors.append(f"Genotype file not found: {genotype_file}")

        if not self.scores_only:
            if self.snp_dir is None:
                errors.append("SNP directory is required unless scoring only")
            elif not self.snp_dir.is_dir():
                errors.append(f"SNP directory does not exist: {self.snp_dir}")

        if self.output_dir is not None and self.output_dir.exists() and not self.output_dir.is_dir():
            errors.append(f"Output directory is not a directory: {self.output_dir}")

        if self.cov_min < 0:
            errors.append(f"cov_min must be non-negative: {self.cov_min}")

        if not 0 <= self.homo_ratio_min <= 1:
            errors.append(f"homo_ratio_min must be between 0 and 1: {self.homo_ratio_min}")

        if not 0 <= self.sample_ratio_min <= 1:
            errors.append(f"sample_ratio_min must be between 0 and 1: {self.sample_ratio_min}")

        if not self.output_suffix:
            errors.append("output_suffix must not be empty")

        return errors
