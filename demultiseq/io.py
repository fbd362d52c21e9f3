import os
import sys
import gzip
import time
import datetime
from itertools import islice
from pathlib import Path
from collections import Counter
from typing import Iterator

import polars as pl
import yaml

from demultiseq.constants import FASTQ_RECORD_LINES, TAG_COLUMN, COUNT_COLUMN
from demultiseq.secondsToText import secondsToText


def check_file(file_str: str) -> Path:
    """Check that a file exists and is readable. Exit otherwise.

    Args:
        file_str (str): Path to the file

    Returns:
        Path: The path as a Path object
    """
    file_path = Path(file_str)
    if not file_path.is_file():
        raise SystemExit(f"Error : File not found: {file_str}")
    if not os.access(file_path, os.R_OK):
        raise SystemExit(f"Error : File is not readable: {file_str}")
    return file_path


def open_text(file_path: Path):
    """Open a plain or gzipped file as text.

    Sequence files are ASCII. Any other byte is replaced by U+FFFD so it
    counts as a mismatching base instead of ending the run.
    """
    if file_path.suffix == ".gz":
        return gzip.open(file_path, "rt", encoding="ascii", errors="replace")
    return open(file_path, "r", encoding="ascii", errors="replace")


def get_read_paths(read1_path: str, read2_path: str) -> tuple[list[Path], list[Path]]:
    """Splits the comma separated R1 and R2 arguments into lists of paths.

    Args:
        read1_path (str): Comma separated list of R1 files
        read2_path (str): Comma separated list of R2 files

    Returns:
        tuple[list[Path], list[Path]]: R1 and R2 paths, paired by position
    """
    read1_paths = [check_file(path) for path in read1_path.split(",")]
    read2_paths = [check_file(path) for path in read2_path.split(",")]
    if len(read1_paths) != len(read2_paths):
        raise SystemExit(
            f"Unequal number of read1 ({len(read1_paths)}) and read2 "
            f"({len(read2_paths)}) files provided.\nExiting"
        )
    return read1_paths, read2_paths


def read_sequences(filename: Path) -> Iterator[str]:
    """Yield the sequence line of every complete 4-line FASTQ record.

    A trailing record with fewer than 4 lines ends the file.

    Args:
        filename (Path): FASTQ file, gzipped or plain

    Yields:
        str: Sequence stripped of its line terminator
    """
    with open_text(Path(filename)) as fastq_file:
        while True:
            record = list(islice(fastq_file, FASTQ_RECORD_LINES))
            if len(record) < FASTQ_RECORD_LINES:
                return
            yield record[1].strip()


def read_pairs(
    read1_paths: list[Path], read2_paths: list[Path]
) -> Iterator[tuple[str, str]]:
    """Yield R1/R2 sequences in lock-step, file pair after file pair.

    Each file pair stops at the end of its shorter file.
    """
    for read1_path, read2_path in zip(read1_paths, read2_paths):
        yield from zip(read_sequences(read1_path), read_sequences(read2_path))


def read_whitelist_lines(filename: str) -> list[str]:
    """Read all lines of a whitelist file."""
    file_path = check_file(filename)
    with open_text(file_path) as whitelist_file:
        return whitelist_file.readlines()


def write_counts(counts_df: pl.DataFrame, outfile: str | None) -> None:
    """Write the count table as tab separated values.

    Args:
        counts_df (pl.DataFrame): Barcode, Multiseq and nUMI columns
        outfile (str | None): Output path. stdout if None
    """
    table = counts_df.write_csv(separator="\t")
    if outfile is None:
        sys.stdout.write(table)
        return
    outdir = os.path.dirname(os.path.abspath(outfile))
    os.makedirs(outdir, exist_ok=True)
    with open(outfile, "w", encoding="utf-8") as counts_file:
        counts_file.write(table)


def write_unmapped(unmapped_tags: Counter, top_unknowns: int, outfile: str) -> None:
    """
    Writes a list of top unmapped multiseq barcodes

    Args:
        unmapped_tags (Counter): Counter of unmapped sequences
        top_unknowns (int): Number of unmapped sequences to output
        outfile (string): Path of the output file
    """
    top_unmapped = unmapped_tags.most_common(top_unknowns)
    unmapped_df = pl.DataFrame(
        top_unmapped,
        schema={TAG_COLUMN: pl.String, COUNT_COLUMN: pl.UInt64},
        orient="row",
    )
    unmapped_df.write_csv(outfile)


def create_report(stats, version: str, start_time: float, args, outfile: str) -> dict:
    """Write a YAML summary of the run.

    Args:
        stats (RunStats): Counters of the run
        version (str): Package version
        start_time (float): Start of the run as returned by time.time()
        args (Namespace): Parsed arguments
        outfile (str): Path of the report

    Returns:
        dict: The report content
    """
    elapsed = time.time() - start_time
    report = {
        "Date": datetime.date.today().isoformat(),
        "Running time": secondsToText(elapsed),
        "DeMultiSeq Version": version,
        "Reads processed": stats.total_pairs,
        "Reads recorded": stats.recorded,
        "Reads dropped": {
            "Barcode unmatched": stats.barcode_unmatched,
            "Multiseq unmatched": stats.tag_unmatched,
            "R1 too short": stats.r1_too_short,
            "R2 too short": stats.r2_too_short,
        },
        "Run parameters": {
            "Read1_paths": args.read1_path,
            "Read2_paths": args.read2_path,
            "Cell barcodes": args.cell_barcodes,
            "Multiseq barcodes": args.multiseq_barcodes,
            "Tolerance": args.tolerance,
            "Multiseq barcode size": args.tag_length,
        },
    }
    with open(outfile, "w", encoding="utf-8") as report_file:
        yaml.safe_dump(report, report_file, sort_keys=False)
    return report
