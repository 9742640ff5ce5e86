"""Zygosity classification and per-position scoring."""

from noisy_snp_filter.scoring.tally import aggregate, decide, keep_decisions, score_files
from noisy_snp_filter.scoring.zygosity import classify

__all__ = ["aggregate", "classify", "decide", "keep_decisions", "score_files"]
