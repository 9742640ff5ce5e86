"""Pytest fixtures for noisy_snp_filter tests."""

from pathlib import Path

import pytest

from noisy_snp_filter.logging_config import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def population_files(tmp_path: Path) -> dict:
    """Create genotype tables for 10 lines and matching call files.

    Test cases:
    - A01:100  9 homo, 1 het             -> sample_ratio 0.9, keep
    - A01:200  8 homo, 2 het             -> sample_ratio 0.8, discard
    - A01:300  all NA (coverage 2)       -> sample_ratio 0, discard
    - A01:400  10 homo                   -> keep (also has insertion 400.1)
    - A02:50   10 homo, plus NA lines    -> keep
    """
    genotype_dir = tmp_path / "genotypes"
    genotype_dir.mkdir()

    files = []
    for i in range(10):
        lines = [
            "A01 100 9 1 10" if i < 9 else "A01 100 5 5 10",
            "A01 200 10 0 10" if i < 8 else "A01 200 4 6 10",
            "A01 300 1 1 2",
            "A01 400 0 12 12",
            "A02 50 20 0 20",
            "A02 50 1 0 1",
        ]
        path = genotype_dir / f"RIL_{i}.genotyped"
        path.write_text("\n".join(lines) + "\n")
        files.append(path)

    snp_dir = tmp_path / "snps"
    snp_dir.mkdir()
    (snp_dir / "polyDB.A01.nr").write_text(
        "chr\tpos\tref_base\tsnp_base\tinsertion\n"
        "A01\t100\tA\tG\tNA\n"
        "A01\t200\tC\tT\tNA\n"
        "A01\t300\tG\tA\tNA\n"
        "A01\t400\tT\tC\tNA\n"
        "A01\t400.1\t-\tA\tA\n"
        "A01\t500\tA\tC\tNA\n"  # Never genotyped
    )
    (snp_dir / "polyDB.A02.nr").write_text(
        "chr\tpos\tref_base\tsnp_base\tinsertion\n"
        "A02\t50\tA\tT\tNA\n"
    )

    return {"genotypes": genotype_dir, "files": files, "snps": snp_dir, "dir": tmp_path}
