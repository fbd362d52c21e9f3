"""Functions for argument parsing
"""

from argparse import ArgumentParser, ArgumentTypeError, RawTextHelpFormatter
from importlib.metadata import PackageNotFoundError, version

from demultiseq.constants import MULTISEQ_BARCODE_LENGTH


def get_package_version():
    """Return package version

    Returns:
        str: Package version as string
    """
    try:
        return version("DeMultiSeq")
    except PackageNotFoundError:
        return "unknown"


def non_negative_int(value: str) -> int:
    """Validates the tolerance"""
    try:
        int_value = int(value)
    except ValueError:
        raise ArgumentTypeError(f"{value} is not an int")
    if int_value < 0:
        raise ArgumentTypeError("Argument must be >= 0")
    return int_value


def positive_int(value: str) -> int:
    """Validates barcode sizes"""
    int_value = non_negative_int(value)
    if int_value == 0:
        raise ArgumentTypeError("Argument must be > 0")
    return int_value


def get_args() -> ArgumentParser:
    """
    Get args.
    """

    parser = ArgumentParser(
        prog="DeMultiSeq",
        formatter_class=RawTextHelpFormatter,
        description=(
            "Demultiplexes MultiSeq paired-end fastq sequences "
            "(expected barcode[16]-umi[10] & multiseq[8]). "
            "Version {}".format(get_package_version())
        ),
    )

    # REQUIRED INPUTS group.
    inputs = parser.add_argument_group("Inputs", description="Required input files.")
    inputs.add_argument(
        "-i",
        "-R1",
        "--read_1",
        dest="read1_path",
        required=True,
        help=(
            "Read 1 of paired-end sequencing in fastq.gz format, or a comma-separated\n"
            "list of paths to all Read1 files (E.g. A1.fq.gz,B1.fq.gz,...)"
        ),
    )
    inputs.add_argument(
        "-I",
        "-R2",
        "--read_2",
        dest="read2_path",
        required=True,
        help=(
            "Read 2 of paired-end sequencing in fastq.gz format, or a comma-separated\n"
            "list of paths to all Read2 files, in the same order as Read1."
        ),
    )
    inputs.add_argument(
        "-c",
        "--cell_barcodes",
        dest="cell_barcodes",
        required=True,
        help="White list of cell barcodes to match against. One barcode per line.",
    )
    inputs.add_argument(
        "-m",
        "--multiseq_barcodes",
        dest="multiseq_barcodes",
        required=True,
        help="White list of multiseq barcodes to match against. One barcode per line.",
    )

    # BARCODES group.
    barcodes = parser.add_argument_group(
        "Barcodes",
        description=(
            "Read1 holds the cell barcode on bases 1 to 16 and the UMI on\n"
            "bases 17 to 26. Read2 starts with the multiseq barcode."
        ),
    )
    barcodes.add_argument(
        "-t",
        "--tol",
        dest="tolerance",
        required=False,
        type=non_negative_int,
        default=0,
        help=(
            "Tolerance of hamming distance to implement on imperfect sequences (default = 0).\n"
            "Applies to both cell and multiseq barcodes."
        ),
    )
    barcodes.add_argument(
        "-s",
        "--size",
        dest="tag_length",
        required=False,
        type=positive_int,
        default=MULTISEQ_BARCODE_LENGTH,
        help="Size of multiseq barcode to extract from R2 (default = 8)",
    )

    # OUTPUTS group.
    outputs = parser.add_argument_group("Outputs")
    outputs.add_argument(
        "-o",
        "--output",
        required=False,
        type=str,
        default=None,
        dest="outfile",
        help="Write the count table to this file instead of stdout.",
    )
    outputs.add_argument(
        "-u",
        "--unmapped-tags",
        required=False,
        type=str,
        dest="unmapped_file",
        default=None,
        help="Write table of unknown multiseq barcodes to file.",
    )
    outputs.add_argument(
        "-ut",
        "--unknown-top-tags",
        required=False,
        dest="unknowns_top",
        type=positive_int,
        default=100,
        help="Top n unmapped multiseq barcodes.",
    )
    outputs.add_argument(
        "-r",
        "--report",
        required=False,
        type=str,
        dest="report_file",
        default=None,
        help="Write a yaml summary of the run to this file.",
    )

    parser.add_argument(
        "-n",
        "--first_n",
        required=False,
        type=positive_int,
        dest="first_n",
        default=float("inf"),
        help="Select N read pairs to run on instead of all.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"DeMultiSeq v{get_package_version()}",
        help="Print version number.",
    )
    return parser
