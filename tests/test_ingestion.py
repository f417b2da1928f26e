"""
Test cases for delimited-text ingestion.
"""

import pytest

from vector_db import (
    DimensionMismatchError,
    InMemoryVectorStore,
    ParseError,
    VectorRecord,
    ingest_delimited_text,
)
from vector_db.ingestion import parse_delimited_line, parse_float


def test_ingest_two_lines():
    store = InMemoryVectorStore()

    count = ingest_delimited_text(store, "1,2,3\n4,5,6\n".splitlines(keepends=True))

    assert count == 2
    assert [r.tolist() for r in store] == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    assert all(r.dimension == 3 for r in store)


def test_blank_lines_are_skipped():
    store = InMemoryVectorStore()

    count = ingest_delimited_text(store, ["1,2\n", "\n", "   \r\n", "3,4\r\n", ""])

    assert count == 2
    assert store[1] == VectorRecord([3, 4])


def test_whitespace_around_fields_is_ignored():
    store = InMemoryVectorStore()

    ingest_delimited_text(store, [" 1.5 , -2e3 ,7 "])

    assert store[0].tolist() == [1.5, -2000.0, 7.0]


def test_malformed_token_reports_line_and_token():
    store = InMemoryVectorStore()

    with pytest.raises(ParseError) as exc_info:
        ingest_delimited_text(store, ["1,x,3\n"])

    err = exc_info.value
    assert err.line_number == 1
    assert err.token == "x"
    assert err.column == 2
    assert "line 1, column 2" in str(err)
    assert len(store) == 0


def test_malformed_line_aborts_whole_batch():
    store = InMemoryVectorStore()
    store.insert(VectorRecord([0, 0]))

    with pytest.raises(ParseError) as exc_info:
        ingest_delimited_text(store, ["1,2\n", "3,4\n", "5,oops\n"])

    assert exc_info.value.line_number == 3
    assert len(store) == 1


def test_trailing_delimiter_is_ignored():
    store = InMemoryVectorStore()

    ingest_delimited_text(store, ["1,2,3,\n"])

    assert store[0].tolist() == [1.0, 2.0, 3.0]
    assert store[0].dimension == 3


def test_doubled_delimiter_drops_empty_field():
    store = InMemoryVectorStore()

    ingest_delimited_text(store, ["1,,3"])

    assert store[0] == VectorRecord([1, 3])


def test_column_counts_empty_fields_in_errors():
    with pytest.raises(ParseError) as exc_info:
        ingest_delimited_text(InMemoryVectorStore(), ["1,,x"])

    assert exc_info.value.column == 3


def test_line_of_only_delimiters_is_skipped():
    store = InMemoryVectorStore()

    assert ingest_delimited_text(store, [",,,", "1,2"]) == 1


def test_ingest_accepts_raw_text():
    store = InMemoryVectorStore()

    count = ingest_delimited_text(store, "1,2,3\n4,5,6\n")

    assert count == 2
    assert [r.tolist() for r in store] == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


@pytest.mark.parametrize("token", ["nan", "inf", "-Infinity"])
def test_non_finite_values_rejected(token):
    with pytest.raises(ParseError, match="not a finite float"):
        parse_float(token, line_number=4)


def test_mixed_dimensions_accepted():
    store = InMemoryVectorStore()

    assert ingest_delimited_text(store, ["1", "1,2", "1,2,3"]) == 3
    assert store.dimensions() == {1, 2, 3}


def test_fixed_dimension_store_rejects_line_before_inserting():
    store = InMemoryVectorStore(dimension=2)

    with pytest.raises(DimensionMismatchError) as exc_info:
        ingest_delimited_text(store, ["1,2", "1,2,3"])

    assert exc_info.value.line_number == 2
    assert len(store) == 0


def test_custom_delimiter():
    store = InMemoryVectorStore()

    ingest_delimited_text(store, ["1;2", "3;4"], delimiter=";")

    assert store[0] == VectorRecord([1, 2])


def test_delimiter_must_be_single_character():
    with pytest.raises(ValueError):
        ingest_delimited_text(InMemoryVectorStore(), ["1,2"], delimiter=",,")


def test_ingest_accepts_generator():
    store = InMemoryVectorStore()

    count = ingest_delimited_text(store, (f"{i},{i}" for i in range(5)))

    assert count == 5
    assert store.nearest_neighbor(VectorRecord([3, 3])) == VectorRecord([3, 3])


def test_parse_delimited_line_blank_returns_none():
    assert parse_delimited_line("\r\n") is None
