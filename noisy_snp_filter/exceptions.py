"""
Custom exceptions for the noise filter.
Kept minimal - only what's needed for clear error handling.
"""

from pathlib import Path


class NoisySnpFilterError(Exception):
    """Base exception for noise filter errors."""
    pass


class MalformedInputError(NoisySnpFilterError, ValueError):
    """Raised when a genotype line does not parse into five valid fields."""

    def __init__(self, message: str, filepath: Path | None = None, line_num: int | None = None) -> None:
        self.filepath = filepath
        self.line_num = line_num
        if filepath is not None and line_num is not None:
            message = f"{filepath}:{line_num}: {message}"
        super().__init__(message)


class OutputConflictError(NoisySnpFilterError, FileExistsError):
    """Raised when an output file exists and overwriting was not requested."""
    pass


class MissingInputError(NoisySnpFilterError, FileNotFoundError):
    """Raised when a genotype source or SNP call file cannot be opened."""
    pass
