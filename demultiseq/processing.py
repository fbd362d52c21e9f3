"""Per read pair processing: extract, resolve against whitelists, aggregate."""
import dataclasses
import enum
import sys
from collections import Counter
from typing import Iterable

from demultiseq.aggregation import AggregationStore
from demultiseq.chemistry import Chemistry
from demultiseq.constants import PROGRESS_INTERVAL
from demultiseq.extraction import MalformedReadError, extract_r1, extract_r2
from demultiseq.mapping import WhitelistIndex


class ReadOutcome(enum.Enum):
    RECORDED = "recorded"
    R1_TOO_SHORT = "r1_too_short"
    R2_TOO_SHORT = "r2_too_short"
    BARCODE_UNMATCHED = "barcode_unmatched"
    TAG_UNMATCHED = "tag_unmatched"


@dataclasses.dataclass
class RunStats:
    total_pairs: int = 0
    recorded: int = 0
    r1_too_short: int = 0
    r2_too_short: int = 0
    barcode_unmatched: int = 0
    tag_unmatched: int = 0

    def add(self, outcome: ReadOutcome) -> None:
        self.total_pairs += 1
        setattr(self, outcome.value, getattr(self, outcome.value) + 1)

    @property
    def dropped(self) -> int:
        return self.total_pairs - self.recorded


class DemultiplexEngine:
    """Demultiplexes read pairs into an AggregationStore.

    Args:
        cell_whitelist (WhitelistIndex): Valid cell barcodes
        tag_whitelist (WhitelistIndex): Valid multiseq barcodes
        tolerance (int): Hamming distance allowed for both barcode and tag
        chemistry (Chemistry): Positions of the fields in the reads
        store (AggregationStore): Store to fill. A new one is created if None
    """

    def __init__(
        self,
        cell_whitelist: WhitelistIndex,
        tag_whitelist: WhitelistIndex,
        tolerance: int,
        chemistry: Chemistry,
        store: AggregationStore | None = None,
    ):
        if tolerance < 0:
            raise ValueError(f"Tolerance must be non negative, got {tolerance}")
        self.cell_whitelist = cell_whitelist
        self.tag_whitelist = tag_whitelist
        self.tolerance = tolerance
        self.chemistry = chemistry
        self.store = store if store is not None else AggregationStore()
        self.stats = RunStats()
        self.unmapped_tags = Counter()

    def process(self, r1_sequence: str, r2_sequence: str) -> ReadOutcome:
        """Process one read pair.

        The pair is recorded only when both the cell barcode and the
        multiseq tag resolve. Anything else is dropped and reported through
        the returned outcome.
        """
        try:
            barcode, umi = extract_r1(
                r1_sequence,
                self.chemistry.cell_barcode_length,
                self.chemistry.umi_length,
            )
        except MalformedReadError:
            return self._count(ReadOutcome.R1_TOO_SHORT)
        try:
            tag = extract_r2(r2_sequence, self.chemistry.tag_length)
        except MalformedReadError:
            return self._count(ReadOutcome.R2_TOO_SHORT)

        canonical_barcode = self.cell_whitelist.resolve(barcode, self.tolerance)
        if canonical_barcode is None:
            return self._count(ReadOutcome.BARCODE_UNMATCHED)
        canonical_tag = self.tag_whitelist.resolve(tag, self.tolerance)
        if canonical_tag is None:
            self.unmapped_tags[tag] += 1
            return self._count(ReadOutcome.TAG_UNMATCHED)

        self.store.record(canonical_barcode, canonical_tag, umi)
        return self._count(ReadOutcome.RECORDED)

    def run(
        self, read_pairs: Iterable[tuple[str, str]], first_n: float = float("inf")
    ) -> RunStats:
        """Process read pairs until the input or `first_n` is exhausted.

        Args:
            read_pairs (Iterable[tuple[str, str]]): R1 and R2 sequences
            first_n (float): Maximum number of pairs to process

        Returns:
            RunStats: Counters for this engine
        """
        for r1_sequence, r2_sequence in read_pairs:
            if self.stats.total_pairs >= first_n:
                break
            self.process(r1_sequence, r2_sequence)
            if self.stats.total_pairs % PROGRESS_INTERVAL == 0:
                print(
                    f"Read pairs processed : {self.stats.total_pairs}",
                    file=sys.stderr,
                )
        return self.stats

    def _count(self, outcome: ReadOutcome) -> ReadOutcome:
        self.stats.add(outcome)
        return outcome
