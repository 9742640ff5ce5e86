"""Parsers for genotype tables."""

from noisy_snp_filter.parsers.genotype import parse_genotype_file, parse_genotype_line

__all__ = [
    "parse_genotype_file",
    "parse_genotype_line",
]
