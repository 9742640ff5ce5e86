"""Tests for the genotype table parser."""

import gzip
from pathlib import Path

import pytest

from noisy_snp_filter.exceptions import MalformedInputError, MissingInputError
from noisy_snp_filter.parsers.genotype import parse_genotype_file, parse_genotype_line


class TestGenotypeLine:
    """Tests for single-line parsing."""

    def test_parse_valid_line(self) -> None:
        """Test parsing a valid five-field line."""
        obs = parse_genotype_line("chr1 100 9 1 10\n")

        assert obs.chr == "chr1"
        assert obs.pos == 100
        assert obs.allele1_count == 9
        assert obs.allele2_count == 1
        assert obs.total_count == 10

    def test_parse_tab_separated(self) -> None:
        """Tabs and mixed whitespace both delimit fields."""
        obs = parse_genotype_line("A01\t1042 \t 0\t12\t12")

        assert obs.chr == "A01"
        assert obs.pos == 1042
        assert obs.allele2_count == 12

    @pytest.mark.parametrize(
        "line",
        [
            "chr1 100 9 1",
            "chr1 100 9 1 10 extra",
            "",
        ],
    )
    def test_wrong_field_count(self, line: str) -> None:
        """Lines without exactly five fields are rejected."""
        with pytest.raises(MalformedInputError, match="expected 5"):
            parse_genotype_line(line)

    @pytest.mark.parametrize(
        "line,field",
        [
            ("chr1 100 -1 1 10", "allele1_count"),
            ("chr1 100 9 NA 10", "allele2_count"),
            ("chr1 100 9 1 10.0", "total_count"),
            ("chr1 abc 9 1 10", "position"),
        ],
    )
    def test_invalid_counts(self, line: str, field: str) -> None:
        """Non-integer or negative counts are rejected."""
        with pytest.raises(MalformedInputError, match=field):
            parse_genotype_line(line)

    def test_error_carries_location(self) -> None:
        """Error message includes file and line number."""
        with pytest.raises(MalformedInputError) as exc_info:
            parse_genotype_line("chr1 100", Path("RIL_1.genotyped"), 7)

        assert exc_info.value.line_num == 7
        assert "RIL_1.genotyped:7" in str(exc_info.value)

    def test_is_value_error(self) -> None:
        """MalformedInputError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_genotype_line("bad")


class TestGenotypeFile:
    """Tests for file streaming."""

    def test_parse_valid_file(self, tmp_path: Path) -> None:
        """Test parsing a valid genotype table."""
        geno = tmp_path / "RIL_1.genotyped"
        geno.write_text(
            "A01 100 9 1 10\n"
            "\n"
            "A01 200 0 0 0\n"
            "A02 50 3 3 6\n"
        )

        observations = list(parse_genotype_file(geno))

        assert len(observations) == 3
        assert observations[1].pos == 200
        assert observations[2].chr == "A02"

    def test_parse_gzipped(self, tmp_path: Path) -> None:
        """Gzipped tables are read transparently."""
        geno = tmp_path / "RIL_1.genotyped.gz"
        with gzip.open(geno, "wt") as f:
            f.write("A01 100 9 1 10\n")

        observations = list(parse_genotype_file(geno))

        assert len(observations) == 1
        assert observations[0].total_count == 10

    def test_windows_line_endings(self, tmp_path: Path) -> None:
        """CRLF line endings are accepted."""
        geno = tmp_path / "RIL_1.genotyped"
        geno.write_bytes(b"A01 100 9 1 10\r\nA01 200 1 1 2\r\n")

        observations = list(parse_genotype_file(geno))

        assert [o.pos for o in observations] == [100, 200]

    def test_malformed_line_number(self, tmp_path: Path) -> None:
        """The reported line number counts blank lines too."""
        geno = tmp_path / "RIL_1.genotyped"
        geno.write_text("A01 100 9 1 10\n\nA01 200 x 1 10\n")

        with pytest.raises(MalformedInputError) as exc_info:
            list(parse_genotype_file(geno))

        assert exc_info.value.line_num == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test error on missing file."""
        with pytest.raises(MissingInputError):
            list(parse_genotype_file(tmp_path / "missing.genotyped"))

    def test_missing_file_is_file_not_found(self, tmp_path: Path) -> None:
        """MissingInputError can be caught as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            list(parse_genotype_file(tmp_path / "missing.genotyped"))
