"""Fixed offset extraction of barcode, UMI and multiseq tag from reads"""

from demultiseq.constants import (
    CELL_BARCODE_LENGTH,
    UMI_LENGTH,
    MULTISEQ_BARCODE_LENGTH,
)


class MalformedReadError(ValueError):
    """Raised when a read is too short for the fields sliced out of it."""


def slice_fixed(sequence: str, width: int, offset: int = 0) -> tuple[str, int]:
    """Take `width` characters of a sequence starting at `offset`.

    Repeated calls feeding back the returned offset walk the sequence left
    to right without overlap.

    Args:
        sequence (str): Read sequence
        width (int): Number of characters to take
        offset (int): Position of the cursor

    Raises:
        MalformedReadError: If fewer than `width` characters remain

    Returns:
        tuple[str, int]: The field and the advanced cursor
    """
    end = offset + width
    if len(sequence) < end:
        raise MalformedReadError(
            f"Read of length {len(sequence)} is too short to take "
            f"{width} bases from position {offset}"
        )
    return sequence[offset:end], end


def extract_r1(
    sequence: str,
    barcode_length: int = CELL_BARCODE_LENGTH,
    umi_length: int = UMI_LENGTH,
) -> tuple[str, str]:
    """Parse the cell barcode then the UMI from Read1."""
    barcode, offset = slice_fixed(sequence, barcode_length)
    umi, _ = slice_fixed(sequence, umi_length, offset)
    return barcode, umi


def extract_r2(sequence: str, tag_length: int = MULTISEQ_BARCODE_LENGTH) -> str:
    """Parse the multiseq barcode from Read2."""
    tag, _ = slice_fixed(sequence, tag_length)
    return tag
