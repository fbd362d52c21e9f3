import pytest
from demultiseq.extraction import (
    MalformedReadError,
    slice_fixed,
    extract_r1,
    extract_r2,
)


def test_slice_fixed_walks_the_sequence():
    field, offset = slice_fixed("AAAACCGG", 4)
    assert (field, offset) == ("AAAA", 4)
    field, offset = slice_fixed("AAAACCGG", 2, offset)
    assert (field, offset) == ("CC", 6)
    field, offset = slice_fixed("AAAACCGG", 2, offset)
    assert (field, offset) == ("GG", 8)


def test_slice_fixed_too_short():
    with pytest.raises(MalformedReadError):
        slice_fixed("AAAACCGG", 2, 7)
    with pytest.raises(MalformedReadError):
        slice_fixed("AAA", 4)


def test_malformed_read_is_a_value_error():
    assert issubclass(MalformedReadError, ValueError)


def test_extract_r1():
    barcode, umi = extract_r1("AAAAAAAAAAAAAAAACCCCCCCCCCTTTTTT")
    assert barcode == "AAAAAAAAAAAAAAAA"
    assert umi == "CCCCCCCCCC"


def test_extract_r1_exact_length():
    assert extract_r1("AAAAAAAAAAAAAAAACCCCCCCCCC") == (
        "AAAAAAAAAAAAAAAA",
        "CCCCCCCCCC",
    )


def test_extract_r1_too_short_for_umi():
    with pytest.raises(MalformedReadError):
        extract_r1("AAAAAAAAAAAAAAAACCCCCCCCC")


def test_extract_r1_custom_layout():
    assert extract_r1("ATGCTTAGG", barcode_length=4, umi_length=3) == ("ATGC", "TTA")


def test_extract_r2():
    assert extract_r2("GGGGGGGGAAAA") == "GGGGGGGG"
    assert extract_r2("GGGGGGGGAAAA", tag_length=10) == "GGGGGGGGAA"
    with pytest.raises(MalformedReadError):
        extract_r2("GGGGGGG")
