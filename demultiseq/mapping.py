"""Mapping module. Holds all code related to matching barcodes against a whitelist
"""
from functools import lru_cache
from typing import Iterable, Iterator

from rapidfuzz import process
from rapidfuzz.distance import Hamming

SCAN_CACHE_SIZE = 2**16


def hamming_distance(seq_a: str, seq_b: str) -> int:
    """Positional hamming distance between two sequences.

    Characters are compared index by index over the common length. Every
    position past the end of the shorter sequence counts as a mismatch, so
    sequences of different lengths are never closer than their length
    difference.

    Args:
        seq_a (str): First sequence
        seq_b (str): Second sequence

    Returns:
        int: Number of mismatching positions
    """
    return Hamming.distance(seq_a, seq_b, pad=True)


class WhitelistIndex:
    """Immutable set of valid barcodes supporting tolerant lookups.

    Tolerant lookups scan the entries in sorted order and return the first
    entry within tolerance. When several entries qualify, the
    lexicographically smallest one wins.
    """

    def __init__(self, barcodes: Iterable[str]):
        self._barcodes = frozenset(barcodes)
        self._ordered = tuple(sorted(self._barcodes))
        self._scan = lru_cache(maxsize=SCAN_CACHE_SIZE)(self._scan_uncached)

    @classmethod
    def load(cls, entries: Iterable[str]) -> "WhitelistIndex":
        """Build an index from raw whitelist lines.

        Lines are stripped of surrounding whitespace and blank lines are
        skipped.

        Args:
            entries (Iterable[str]): One barcode per entry

        Returns:
            WhitelistIndex: The index
        """
        return cls(line.strip() for line in entries if line.strip())

    def __contains__(self, barcode: str) -> bool:
        return barcode in self._barcodes

    def __len__(self) -> int:
        return len(self._barcodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __repr__(self) -> str:
        return f"WhitelistIndex(n_barcodes={len(self)})"

    @property
    def entry_length(self) -> int | None:
        """Length shared by the entries, None if empty or mixed."""
        lengths = {len(barcode) for barcode in self._barcodes}
        if len(lengths) != 1:
            return None
        return lengths.pop()

    def resolve(self, candidate: str, tolerance: int = 0) -> str | None:
        """Find the whitelist entry a candidate maps to.

        Args:
            candidate (str): Observed barcode
            tolerance (int): Maximum hamming distance allowed

        Returns:
            str | None: The canonical whitelist entry, None if nothing matches
        """
        if candidate in self._barcodes:
            return candidate
        if tolerance <= 0:
            return None
        return self._scan(candidate, tolerance)

    def _scan_uncached(self, candidate: str, tolerance: int) -> str | None:
        # extract_iter yields the qualifying entries in whitelist order
        match = next(
            process.extract_iter(
                candidate,
                self._ordered,
                scorer=Hamming.distance,
                scorer_kwargs={"pad": True},
                score_cutoff=tolerance,
            ),
            None,
        )
        if match is None:
            return None
        barcode, _, _ = match
        return barcode
