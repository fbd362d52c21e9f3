"""Test function preprocessing of the module"""

import glob

import pytest
import polars as pl
from demultiseq.mapping import WhitelistIndex
from demultiseq.preprocessing import (
    check_equi_length,
    check_sequence_pattern,
    parse_whitelist_file,
    check_tags,
)
from demultiseq.constants import ATGC_PATTERN, SEQUENCE_COLUMN


@pytest.fixture
def cell_barcodes_path():
    return "tests/test_data/whitelists/pass/cell_barcodes.txt"


@pytest.fixture
def multiseq_barcodes_path():
    return "tests/test_data/whitelists/pass/multiseq_barcodes.txt"


@pytest.fixture
def failing_whitelists():
    return "tests/test_data/whitelists/fail/*.txt"


def test_parse_whitelist_file(cell_barcodes_path):
    whitelist = parse_whitelist_file(cell_barcodes_path, 16, "cell barcodes")
    assert list(whitelist) == [
        "AAAAAAAAAAAAAAAA",
        "CCCCCCCCCCCCCCCC",
        "GTACGTACGTACGTAC",
    ]


def test_parse_gzipped_whitelist_file(cell_barcodes_path):
    whitelist = parse_whitelist_file(cell_barcodes_path + ".gz", 16, "cell barcodes")
    assert len(whitelist) == 3


def test_parse_whitelist_skips_blank_lines(multiseq_barcodes_path):
    whitelist = parse_whitelist_file(multiseq_barcodes_path, 8, "multiseq barcodes")
    assert list(whitelist) == ["ACGTACGT", "GGGGGGGG", "TTTTTTTT"]


def test_failing_whitelists(failing_whitelists):
    failing_files = glob.glob(failing_whitelists)
    assert failing_files
    for file_path in failing_files:
        with pytest.raises(SystemExit):
            parse_whitelist_file(file_path, 16, "cell barcodes")


def test_whitelist_length_must_match_extraction(multiseq_barcodes_path):
    with pytest.raises(SystemExit):
        parse_whitelist_file(multiseq_barcodes_path, 10, "multiseq barcodes")


def test_missing_whitelist():
    with pytest.raises(SystemExit):
        parse_whitelist_file("tests/test_data/whitelists/missing.txt", 16, "cell")


def test_empty_whitelist(tmp_path):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n\n")
    with pytest.raises(SystemExit):
        parse_whitelist_file(str(empty), 16, "cell barcodes")


def test_check_equi_length():
    check_equi_length(
        pl.DataFrame({SEQUENCE_COLUMN: ["ATGC", "GGCC"]}), SEQUENCE_COLUMN, "test"
    )
    with pytest.raises(SystemExit):
        check_equi_length(
            pl.DataFrame({SEQUENCE_COLUMN: ["ATGC", "GGC"]}), SEQUENCE_COLUMN, "test"
        )


def test_check_sequence_pattern():
    with pytest.raises(SystemExit):
        check_sequence_pattern(
            df=pl.DataFrame({SEQUENCE_COLUMN: ["ATGC", "ATGN"]}),
            pattern=ATGC_PATTERN,
            column_name=SEQUENCE_COLUMN,
            file_type="test",
            expected_pattern="ATGC",
            filename="test",
        )


def test_check_tags_close_pairs(capsys):
    tags = WhitelistIndex.load(["AAAAAAAA", "AAAAAATT", "GGGGGGGG"])
    offending = check_tags(tags, 1)
    assert offending == [["AAAAAAAA", "AAAAAATT", 2]]
    assert "[WARNING]" in capsys.readouterr().err


def test_check_tags_without_tolerance():
    tags = WhitelistIndex.load(["AAAAAAAA", "AAAAAAAT"])
    assert check_tags(tags, 0) == []
