"""Sets of functions to validate the inputs before processing reads"""

import sys
from itertools import combinations

import polars as pl

from demultiseq.io import read_whitelist_lines
from demultiseq.mapping import WhitelistIndex, hamming_distance
from demultiseq.constants import SEQUENCE_COLUMN, ATGC_PATTERN


def check_equi_length(df: pl.DataFrame, column_name: str, filename: str):
    """Check that all the barcodes in the specified column of a polars DataFrame are the same length.

    Args:
        df (pl.DataFrame): The DataFrame containing the barcodes.
        column_name (str): The name of the column containing the barcodes.
        filename (str): File the barcodes come from.

    Raises:
        SystemExit: If the barcodes have different lengths.

    """
    barcode_lengths = df[column_name].str.len_chars().unique()
    if len(barcode_lengths) > 1:
        raise SystemExit(
            f"[ERROR] Barcodes in {filename} have different lengths: "
            f"{sorted(barcode_lengths.to_list())}"
        )


def check_sequence_pattern(
    df: pl.DataFrame,
    pattern: str,
    column_name: str,
    file_type: str,
    expected_pattern: str,
    filename: str,
) -> None:
    """Check that a column of a polars df matches a given pattern and exit if not

    Args:
        df (pl.DataFrame): Df holding the info to be tested
        pattern (str): Regex pattern to be tested
        column_name (str): Which column to test
        file_type (str): File type for the error raised
        expected_pattern (str): Human readable pattern to be raised
        filename (str): File the sequences come from

    Raises:
        SystemExit: Exits if some patterns don't match
    """
    offending = df.filter(~pl.col(column_name).str.contains(pattern))
    if not offending.is_empty():
        sequences_str = "\n".join(offending[column_name].to_list())
        raise SystemExit(
            f"Some sequences in the {file_type} file are not only composed "
            f"of {expected_pattern}. "
            f"Here are the sequences:\n{sequences_str}\nFilepath: {filename}"
        )


def parse_whitelist_file(
    filename: str, barcode_length: int, file_type: str
) -> WhitelistIndex:
    """Reads a whitelist with one barcode per line.

    Barcodes must be made of ATGC, share one length and that length must be
    the one extracted from the reads.

    Args:
        filename (str): Path to the whitelist, plain text or gzip
        barcode_length (int): Length of the barcodes extracted from the reads
        file_type (str): Human readable name of the whitelist for errors

    Returns:
        WhitelistIndex: The validated whitelist
    """
    whitelist = WhitelistIndex.load(read_whitelist_lines(filename))
    if len(whitelist) == 0:
        raise SystemExit(f"[ERROR] The {file_type} file {filename} is empty.")
    barcodes_df = pl.DataFrame(
        {SEQUENCE_COLUMN: list(whitelist)}, schema={SEQUENCE_COLUMN: pl.String}
    )
    check_sequence_pattern(
        df=barcodes_df,
        pattern=ATGC_PATTERN,
        column_name=SEQUENCE_COLUMN,
        file_type=file_type,
        expected_pattern="ATGC",
        filename=filename,
    )
    check_equi_length(df=barcodes_df, column_name=SEQUENCE_COLUMN, filename=filename)
    if whitelist.entry_length != barcode_length:
        raise SystemExit(
            f"[ERROR] Barcodes in the {file_type} file are {whitelist.entry_length}bp "
            f"long but {barcode_length}bp are extracted from the reads.\n"
            f"Exiting the application.\n"
        )
    return whitelist


def check_tags(tag_whitelist: WhitelistIndex, tolerance: int) -> list:
    """Evaluates the distance between the multiseq barcodes based on the
    tolerance.

    Two tags closer than twice the tolerance can both match the same read.
    Such reads are assigned to the first tag in sorted order, so this only
    warns.

    Args:
        tag_whitelist (WhitelistIndex): Multiseq barcodes
        tolerance (int): Hamming distance allowed

    Returns:
        list: Offending [tag_a, tag_b, distance] triples
    """
    offending_pairs = []
    if tolerance == 0:
        return offending_pairs
    for tag_a, tag_b in combinations(tag_whitelist, 2):
        distance = hamming_distance(tag_a, tag_b)
        if distance <= 2 * tolerance:
            offending_pairs.append([tag_a, tag_b, distance])
    if offending_pairs:
        print(
            "[WARNING] Hamming distance between some multiseq barcodes is "
            "within twice the tolerance.\n"
            "Reads matching several of them go to the first one in sorted order.\n\n"
            "Offending case(s):\n",
            file=sys.stderr,
        )
        for pair in offending_pairs:
            print(f"\t{pair[0]}\n\t{pair[1]}\n\tDistance = {pair[2]}\n", file=sys.stderr)
    return offending_pairs
