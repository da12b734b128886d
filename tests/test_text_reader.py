"""Tests for matrix ingestion (text and NPY readers, MatrixStore)."""

from __future__ import annotations

import io

import numpy as np
import pytest

from matstat.core.errors import InvalidMatrixError, ParseError, RaggedRowsWarning
from matstat.io import MatrixStore
from matstat.io.readers import (
    load_npy_matrix,
    load_text_matrix,
    parse_int_token,
    parse_matrix_lines,
    read_matrix_auto,
)


def test_load_from_path_is_row_major(write_matrix, sample_text: str) -> None:
    m = load_text_matrix(write_matrix(sample_text))
    assert m.shape == (2, 3)
    assert m.buffer.tolist() == [1, 2, 3, 4, 5, 6]


def test_tabs_and_runs_of_spaces_split_the_same() -> None:
    m = parse_matrix_lines(["1\t2   3\n", "  4 \t 5\t\t6  \n"])
    assert m.tolist() == [[1, 2, 3], [4, 5, 6]]


def test_signed_tokens() -> None:
    m = parse_matrix_lines(["+3 -4 0\n"])
    assert m.tolist() == [[3, -4, 0]]


def test_blank_lines_are_skipped() -> None:
    m = parse_matrix_lines(["1 2\n", "\n", "   \t\n", "3 4\n"])
    assert m.shape == (2, 2)


def test_empty_input_has_zero_rows() -> None:
    m = load_text_matrix(io.StringIO(""))
    assert m.num_rows == 0
    assert m.is_empty()


@pytest.mark.parametrize("token", ["1.5", "x", "1e3", "--2", "0x10", "", "١٢"])
def test_parse_int_token_rejects_non_integers(token: str) -> None:
    with pytest.raises(ParseError, match="not an integer"):
        parse_int_token(token)


def test_parse_int_token_rejects_out_of_range() -> None:
    with pytest.raises(ParseError, match="64-bit"):
        parse_int_token(str(2**63))


def test_parse_error_identifies_line_and_token() -> None:
    with pytest.raises(ParseError) as info:
        parse_matrix_lines(["1 2 3\n", "4 five 6\n"], context="m.txt")

    err = info.value
    assert err.line_no == 2
    assert err.column == 2
    assert err.token == "five"
    assert "m.txt, line 2" in str(err)
    assert "'five'" in str(err)


def test_strict_policy_rejects_ragged_rows() -> None:
    with pytest.raises(InvalidMatrixError, match="line 2: found 2 values; expected 3"):
        parse_matrix_lines(["1 2 3\n", "4 5\n"], width_policy="strict")


def test_last_policy_reinterprets_with_last_width() -> None:
    with pytest.warns(RaggedRowsWarning, match="last row's width of 2"):
        m = parse_matrix_lines(["1 2 3\n", "4\n", "5 6\n"], width_policy="last")
    assert m.tolist() == [[1, 2], [3, 4], [5, 6]]


def test_last_policy_drops_values_beyond_last_width() -> None:
    with pytest.warns(RaggedRowsWarning):
        m = parse_matrix_lines(["1 2 3\n", "4 5 6\n", "7 8\n"], width_policy="last")
    assert m.tolist() == [[1, 2], [3, 4], [5, 6]]


def test_last_policy_raises_when_too_few_values() -> None:
    with pytest.warns(RaggedRowsWarning):
        with pytest.raises(InvalidMatrixError, match="cannot be laid out"):
            parse_matrix_lines(["1\n", "2 3\n"], width_policy="last")


def test_unknown_width_policy() -> None:
    with pytest.raises(ValueError, match="width_policy"):
        parse_matrix_lines(["1\n"], width_policy="loose")


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_text_matrix(tmp_path / "nope.txt")


def test_npy_integer_matrix(tmp_path) -> None:
    path = tmp_path / "m.npy"
    np.save(path, np.array([[1, 2, 3], [4, 5, 6]], dtype=np.int32))
    m = load_npy_matrix(path)
    assert m.tolist() == [[1, 2, 3], [4, 5, 6]]
    assert m.buffer.dtype == np.int64


def test_npy_1d_is_single_row(tmp_path) -> None:
    path = tmp_path / "v.npy"
    np.save(path, np.array([7, 8, 9]))
    assert load_npy_matrix(path).shape == (1, 3)


def test_npy_float_matrix_is_rejected(tmp_path) -> None:
    path = tmp_path / "f.npy"
    np.save(path, np.array([[1.0, 2.5]]))
    with pytest.raises(ParseError, match="expected integer data"):
        load_npy_matrix(path)


def test_auto_reader_dispatches_on_suffix(tmp_path, write_matrix, sample_text: str) -> None:
    npy = tmp_path / "m.npy"
    np.save(npy, np.array([[1, 2, 3], [4, 5, 6]]))
    txt = write_matrix(sample_text, name="m.tsv")
    assert read_matrix_auto(npy) == read_matrix_auto(txt)


def test_store_loads_streams_and_paths(write_matrix, sample_text: str) -> None:
    store = MatrixStore(width_policy="strict")
    from_stream = store.load(io.StringIO(sample_text))
    from_path = store.load(str(write_matrix(sample_text)))
    assert from_stream == from_path
