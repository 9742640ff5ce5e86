"""Tests for the Typer CLI."""

from pathlib import Path

from typer.testing import CliRunner

from noisy_snp_filter.cli import app

runner = CliRunner()


def genotype_args(population_files: dict) -> list[str]:
    return [str(p) for p in population_files["files"]]


class TestCli:
    """End-to-end CLI invocations."""

    def test_filter(self, population_files: dict) -> None:
        """Default run writes filtered files next to the call files."""
        result = runner.invoke(
            app,
            genotype_args(population_files) + ["--snp-dir", str(population_files["snps"])],
        )

        assert result.exit_code == 0, result.output
        assert (population_files["snps"] / "polyDB.A01.nr.pop-filtered").exists()
        assert "Noise reduction complete" in result.output

    def test_thresholds_passed_through(self, population_files: dict) -> None:
        """--sample-ratio-min 0.8 keeps A01:200 as well."""
        result = runner.invoke(
            app,
            genotype_args(population_files)
            + ["--snp-dir", str(population_files["snps"]), "--sample-ratio-min", "0.8"],
        )

        assert result.exit_code == 0, result.output
        text = (population_files["snps"] / "polyDB.A01.nr.pop-filtered").read_text()
        assert "A01\t200\t" in text

    def test_existing_output_fails(self, population_files: dict) -> None:
        """Existing outputs fail the run unless --force is given."""
        snps = population_files["snps"]
        (snps / "polyDB.A01.nr.pop-filtered").write_text("previous\n")
        args = genotype_args(population_files) + ["--snp-dir", str(snps)]

        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = runner.invoke(app, args + ["--force"])
        assert result.exit_code == 0, result.output

    def test_missing_snp_dir(self, population_files: dict) -> None:
        """Validation errors exit with code 1."""
        result = runner.invoke(app, genotype_args(population_files))

        assert result.exit_code == 1
        assert "SNP directory is required" in result.output

    def test_invalid_options_leave_out_dir_uncreated(self, population_files: dict, tmp_path: Path) -> None:
        """A run that fails validation does not create --out-dir."""
        out_dir = tmp_path / "filtered"

        result = runner.invoke(app, genotype_args(population_files) + ["--out-dir", str(out_dir)])

        assert result.exit_code == 1
        assert "SNP directory is required" in result.output
        assert not out_dir.exists()

    def test_new_out_dir_created(self, population_files: dict, tmp_path: Path) -> None:
        """A valid run creates a missing --out-dir and writes into it."""
        out_dir = tmp_path / "new" / "filtered"

        result = runner.invoke(
            app,
            genotype_args(population_files)
            + ["--snp-dir", str(population_files["snps"]), "--out-dir", str(out_dir)],
        )

        assert result.exit_code == 0, result.output
        assert (out_dir / "polyDB.A01.nr.pop-filtered").exists()

    def test_scores_only(self, population_files: dict, tmp_path: Path) -> None:
        """--scores-only writes the score table without a SNP directory."""
        scores = tmp_path / "scores.tsv"

        result = runner.invoke(
            app,
            genotype_args(population_files)
            + ["--scores-only", "--scores-file", str(scores), "--out-dir", str(tmp_path / "out")],
        )

        assert result.exit_code == 0, result.output
        assert scores.read_text().startswith("chr\tpos\thomo")

    def test_log_dir(self, population_files: dict, tmp_path: Path) -> None:
        """--log-dir writes a debug log under DIR/logs."""
        log_dir = tmp_path / "run_logs"

        result = runner.invoke(
            app,
            genotype_args(population_files)
            + ["--snp-dir", str(population_files["snps"]), "--log-dir", str(log_dir)],
        )

        assert result.exit_code == 0, result.output
        assert list((log_dir / "logs").glob("noise_filter_*.log"))

    def test_malformed_input(self, population_files: dict) -> None:
        """Malformed genotype lines are reported and exit 1."""
        population_files["files"][0].write_text("A01 100 nine 1 10\n")

        result = runner.invoke(
            app,
            genotype_args(population_files) + ["--snp-dir", str(population_files["snps"])],
        )

        assert result.exit_code == 1
        assert "allele1_count" in result.output
