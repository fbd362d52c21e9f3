"""Storage of the distinct UMIs seen per cell barcode and multiseq tag"""
from collections import defaultdict
from typing import Iterator

import polars as pl

from demultiseq.constants import BARCODE_COLUMN, MULTISEQ_COLUMN, NUMI_COLUMN


class AggregationStore:
    """Two level mapping barcode -> tag -> set of UMIs.

    Only grows during a run. The count reported for a (barcode, tag) pair is
    the number of distinct UMIs, not the number of reads.
    """

    def __init__(self):
        self._data = defaultdict(lambda: defaultdict(set))

    def record(self, barcode: str, tag: str, umi: str) -> None:
        self._data[barcode][tag].add(umi)

    def count(self, barcode: str, tag: str) -> int:
        if barcode not in self._data:
            return 0
        return len(self._data[barcode].get(tag, ()))

    def report(self) -> Iterator[tuple[str, str, int]]:
        """Yield (barcode, tag, n_umi) for every recorded pair.

        Order is unspecified. Use `sorted_report` for a stable order.
        """
        for barcode, tags in self._data.items():
            for tag, umis in tags.items():
                yield barcode, tag, len(umis)

    def sorted_report(self) -> list[tuple[str, str, int]]:
        return sorted(self.report())

    def to_frame(self) -> pl.DataFrame:
        """Counts as a DataFrame sorted by barcode then tag.

        Returns:
            pl.DataFrame: Barcode, Multiseq and nUMI columns
        """
        rows = self.sorted_report()
        return pl.DataFrame(
            rows,
            schema={
                BARCODE_COLUMN: pl.String,
                MULTISEQ_COLUMN: pl.String,
                NUMI_COLUMN: pl.UInt32,
            },
            orient="row",
        )

    def merge(self, other: "AggregationStore") -> None:
        """Add all the UMIs of another store into this one.

        Args:
            other (AggregationStore): Store filled from another shard of reads
        """
        for barcode, tags in other._data.items():
            for tag, umis in tags.items():
                self._data[barcode][tag].update(umis)

    def __len__(self) -> int:
        return sum(len(tags) for tags in self._data.values())
