"""Unit tests for splitting data-call arguments into data and options."""

from __future__ import annotations

import numpy as np
import pytest

from webplotly.args import split_args
from webplotly.errors import PlotlyArgumentError


def test_compound_prefix_is_data_and_tail_is_options() -> None:
    x, y = [1, 2, 3], [4, 5, 6]
    data, options = split_args([x, y, "filename", "f", "fileopt", "overwrite"])
    assert data == [x, y]
    assert options == {"filename": "f", "fileopt": "overwrite"}


@pytest.mark.parametrize("split_at", [0, 1, 2, 3])
def test_every_split_point_is_respected(split_at: int) -> None:
    compounds = [[1], (2, 3), {"x": [1]}][:split_at]
    tail = ["a", 1, "b", [2]]
    data, options = split_args(compounds + tail)
    assert data == compounds
    assert options == {"a": 1, "b": [2]}


def test_scalar_ends_data_even_if_compounds_follow() -> None:
    data, options = split_args([[1], "layout", {"title": "t"}])
    assert data == [[1]]
    assert options == {"layout": {"title": "t"}}


def test_no_compound_values_means_no_data() -> None:
    data, options = split_args(["filename", "f"])
    assert data == []
    assert options == {"filename": "f"}


def test_all_compound_values_means_no_options() -> None:
    data, options = split_args([[1, 2], [3, 4]])
    assert data == [[1, 2], [3, 4]]
    assert options == {}


def test_single_list_of_lists_is_kept_as_one_data_item() -> None:
    data, _ = split_args([[[1, 2], [3, 4]]])
    assert data == [[[1, 2], [3, 4]]]


def test_numpy_arrays_count_as_data() -> None:
    arr = np.array([1, 2, 3])
    data, options = split_args([arr, "filename", "f"])
    assert len(data) == 1 and data[0] is arr
    assert options == {"filename": "f"}


def test_native_keywords_override_flat_tail() -> None:
    _, options = split_args([[1], "filename", "a"], {"filename": "b", "fileopt": "new"})
    assert options == {"filename": "b", "fileopt": "new"}


def test_odd_tail_is_rejected() -> None:
    with pytest.raises(PlotlyArgumentError):
        split_args([[1], "filename"])


def test_non_string_option_name_is_rejected() -> None:
    with pytest.raises(TypeError):
        split_args([[1], 5, "x"])
