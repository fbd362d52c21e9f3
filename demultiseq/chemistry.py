"""Read structure definition of a MULTI-seq run."""
from argparse import Namespace
from dataclasses import dataclass

from demultiseq.constants import (
    CELL_BARCODE_LENGTH,
    UMI_LENGTH,
    MULTISEQ_BARCODE_LENGTH,
)


@dataclass(frozen=True)
class Chemistry:
    cell_barcode_length: int = CELL_BARCODE_LENGTH
    umi_length: int = UMI_LENGTH
    tag_length: int = MULTISEQ_BARCODE_LENGTH


def create_chemistry_definition(args: Namespace) -> Chemistry:
    if args.tag_length < 1:
        raise SystemExit(
            f"[ERROR] Multiseq barcode size must be positive, got {args.tag_length}"
        )
    return Chemistry(tag_length=args.tag_length)
