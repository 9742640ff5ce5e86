"""
Population-based SNP noise reduction.

Flags genomic positions where heterozygosity is over-represented across the
individual lines of a population (e.g. RILs genotyped without a second
parent) and removes those positions from per-chromosome SNP call files.
"""

__version__ = "1.0.0"
__author__ = "Data Tecnica International"
