"""Per-sample zygosity classification.

Each observation falls into one of three classes:
- NA:   total coverage is 0 or below cov_min
- homo: the major allele makes up at least homo_ratio_min of the coverage
- het:  otherwise
Both thresholds are inclusive.
"""

from noisy_snp_filter.models import Zygosity

DEFAULT_COV_MIN = 3
DEFAULT_HOMO_RATIO_MIN = 0.9


def classify(
    allele1_count: int,
    allele2_count: int,
    total_count: int,
    cov_min: int = DEFAULT_COV_MIN,
    homo_ratio_min: float = DEFAULT_HOMO_RATIO_MIN,
) -> Zygosity:
    """Classify one observation as homozygous, heterozygous or NA.

    Args:
        allele1_count: Reads supporting allele 1
        allele2_count: Reads supporting allele 2
        total_count: Total coverage
        cov_min: Minimum coverage to attempt a call
        homo_ratio_min: Minimum major-allele fraction to call homozygous

    Returns:
        Zygosity for the observation

    Example:
        >>> classify(9, 1, 10)
        Zygosity.HOMO
        >>> classify(1, 1, 2)
        Zygosity.NA
    """
    if total_count == 0 or total_count < cov_min:
        return Zygosity.NA

    homo_ratio = max(allele1_count, allele2_count) / total_count
    return Zygosity.HOMO if homo_ratio >= homo_ratio_min else Zygosity.HET
