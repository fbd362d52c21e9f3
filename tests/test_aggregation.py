import pytest
import polars as pl
from polars.testing import assert_frame_equal
from demultiseq.aggregation import AggregationStore


@pytest.fixture
def store():
    store = AggregationStore()
    store.record("CCCC", "GGGG", "AAAA")
    store.record("CCCC", "GGGG", "TTTT")
    store.record("CCCC", "TTTT", "AAAA")
    store.record("AAAA", "GGGG", "AAAA")
    return store


def test_record_is_idempotent_on_umis():
    store = AggregationStore()
    store.record("CCCC", "GGGG", "AAAA")
    store.record("CCCC", "GGGG", "AAAA")
    assert store.count("CCCC", "GGGG") == 1
    assert list(store.report()) == [("CCCC", "GGGG", 1)]


def test_count(store):
    assert store.count("CCCC", "GGGG") == 2
    assert store.count("CCCC", "TTTT") == 1
    assert store.count("AAAA", "TTTT") == 0
    assert store.count("GGGG", "GGGG") == 0


def test_count_does_not_create_keys(store):
    store.count("GGGG", "GGGG")
    assert len(store) == 3


def test_report(store):
    assert sorted(store.report()) == [
        ("AAAA", "GGGG", 1),
        ("CCCC", "GGGG", 2),
        ("CCCC", "TTTT", 1),
    ]
    assert store.sorted_report() == sorted(store.report())


def test_empty_report():
    store = AggregationStore()
    assert list(store.report()) == []
    assert len(store) == 0
    assert store.to_frame().shape == (0, 3)


def test_to_frame(store):
    expected = pl.DataFrame(
        {
            "Barcode": ["AAAA", "CCCC", "CCCC"],
            "Multiseq": ["GGGG", "GGGG", "TTTT"],
            "nUMI": [1, 2, 1],
        },
        schema={"Barcode": pl.String, "Multiseq": pl.String, "nUMI": pl.UInt32},
    )
    assert_frame_equal(store.to_frame(), expected)


def test_merge(store):
    other = AggregationStore()
    other.record("CCCC", "GGGG", "AAAA")
    other.record("CCCC", "GGGG", "GGGG")
    other.record("TTTT", "GGGG", "AAAA")
    store.merge(other)
    assert store.count("CCCC", "GGGG") == 3
    assert store.count("TTTT", "GGGG") == 1
    assert other.count("AAAA", "GGGG") == 0
    assert len(store) == 4
