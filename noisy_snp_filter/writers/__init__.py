"""Output writers for filtered call files, score tables and run logs."""

from noisy_snp_filter.writers.call_files import filter_call_file
from noisy_snp_filter.writers.scores import write_scores

__all__ = ["filter_call_file", "write_scores"]
