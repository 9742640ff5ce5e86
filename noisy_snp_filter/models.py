"""Data models for the noise filter.

Observations, zygosity classes, per-position tallies and run statistics.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class Zygosity(str, Enum):
    """Classification of a single sample observation at one position."""

    NA = "NA"  # Coverage too low to judge
    HOMO = "homo"
    HET = "het"


@dataclass(slots=True, frozen=True)
class Observation:
    """One line of a genotype table.

    Attributes:
        chr: Chromosome identifier
        pos: Base pair position
        allele1_count: Reads supporting the first parental allele
        allele2_count: Reads supporting the second parental allele
        total_count: Total reads at the position
    """

    chr: str
    pos: int
    allele1_count: int
    allele2_count: int
    total_count: int


@dataclass(slots=True)
class PositionTally:
    """Zygosity counts for one (chromosome, position) across all samples.

    `sample_ratio` and `keep` stay unset until `decide()` runs.
    """

    homo: int = 0
    het: int = 0
    na: int = 0
    sample_ratio: float | None = None
    keep: bool | None = None

    def add(self, zygosity: Zygosity) -> None:
        """Increment the count for one classification."""
        if zygosity is Zygosity.HOMO:
            self.homo += 1
        elif zygosity is Zygosity.HET:
            self.het += 1
        else:
            self.na += 1

    @property
    def total_scored(self) -> int:
        """Samples classified homo or het (NA excluded)."""
        return self.homo + self.het

    def counts(self) -> tuple[int, int, int]:
        return self.homo, self.het, self.na


class TallyMap:
    """Caller-owned chromosome -> position -> PositionTally mapping.

    Built by `aggregate()`, annotated in place by `decide()`, read by the
    rewriter. Positions are stored under their normalized string key.
    """

    def __init__(self) -> None:
        self._data: dict[str, dict[str, PositionTally]] = {}

    def tally(self, chr_val: str, pos_key: str) -> PositionTally:
        """Get the tally for a key, creating a zeroed one on first encounter."""
        positions = self._data.setdefault(chr_val, {})
        tally = positions.get(pos_key)
        if tally is None:
            tally = PositionTally()
            positions[pos_key] = tally
        return tally

    def get(self, chr_val: str, pos_key: str) -> PositionTally | None:
        return self._data.get(chr_val, {}).get(pos_key)

    @property
    def chromosomes(self) -> list[str]:
        return sorted(self._data)

    def items(self) -> Iterator[tuple[str, str, PositionTally]]:
        """Yield (chromosome, position, tally) sorted by chromosome then position."""
        for chr_val in sorted(self._data):
            positions = self._data[chr_val]
            for pos_key in sorted(positions, key=_position_sort_key):
                yield chr_val, pos_key, positions[pos_key]

    def as_counts(self) -> dict[str, dict[str, tuple[int, int, int]]]:
        """Plain (homo, het, NA) counts, for comparing tally maps."""
        return {
            chr_val: {pos: t.counts() for pos, t in positions.items()}
            for chr_val, positions in self._data.items()
        }

    def __len__(self) -> int:
        return sum(len(positions) for positions in self._data.values())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        chr_val, pos_key = key
        return pos_key in self._data.get(chr_val, {})


def _position_sort_key(pos_key: str) -> tuple[int, str]:
    return (int(pos_key), pos_key) if pos_key.isdigit() else (-1, pos_key)


@dataclass
class FilterResult:
    """Outcome of rewriting one per-chromosome call file."""

    chr: str
    input_path: str
    output_path: str
    kept: int = 0
    removed: int = 0


@dataclass
class Statistics:
    """Running statistics for a filter run."""

    # Genotype input
    files_scored: int = 0
    observations: int = 0
    na_observations: int = 0
    homo_observations: int = 0
    het_observations: int = 0

    # Decisions
    positions_kept: int = 0
    positions_discarded: int = 0

    # Call file rewriting
    filter_results: list[FilterResult] = field(default_factory=list)

    def record(self, zygosity: Zygosity) -> None:
        self.observations += 1
        if zygosity is Zygosity.HOMO:
            self.homo_observations += 1
        elif zygosity is Zygosity.HET:
            self.het_observations += 1
        else:
            self.na_observations += 1

    @property
    def positions_scored(self) -> int:
        """Total positions with a decision."""
        return self.positions_kept + self.positions_discarded

    @property
    def lines_kept(self) -> int:
        return sum(r.kept for r in self.filter_results)

    @property
    def lines_removed(self) -> int:
        return sum(r.removed for r in self.filter_results)
