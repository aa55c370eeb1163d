"""Tests for :mod:`mergestats.summary`."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from mergestats.summary import SUMMARY_FIELDS, Summary, summarize_frame


def test_summary_to_dict() -> None:
    summary = Summary.from_iterable([1, 4, 2, 3, 10, 2])
    stats = summary.to_dict()
    assert stats["count"] == 6
    assert stats["nulls"] == 0
    assert (stats["min"], stats["max"]) == (1, 10)
    assert stats["mean"] == pytest.approx(22 / 6)
    assert stats["median"] == 2.5
    assert stats["mode"] == 2
    assert stats["cardinality"] == 5
    assert stats["stddev"] == pytest.approx(math.sqrt(stats["variance"]))


def test_summary_counts_missing_values_as_nulls() -> None:
    summary = Summary.from_iterable([1.0, None, float("nan"), 3.0])
    stats = summary.to_dict()
    assert stats["count"] == 4
    assert stats["nulls"] == 2
    assert stats["mean"] == pytest.approx(2.0)
    assert stats["median"] == 2.0
    assert stats["cardinality"] == 2


def test_empty_summary_reports_absence() -> None:
    stats = Summary().to_dict()
    assert stats["count"] == 0
    assert all(stats[key] is None for key in ("min", "max", "mean", "median", "mode"))


def test_summary_merge_matches_single_pass() -> None:
    data = [5, 1, None, 5, 2, 8, 5, 1]
    whole = Summary.from_iterable(data).to_dict()
    left = Summary.from_iterable(data[:3])
    left.merge(Summary.from_iterable(data[3:]))
    merged = left.to_dict()
    for key in SUMMARY_FIELDS:
        if isinstance(whole[key], float):
            assert merged[key] == pytest.approx(whole[key])
        else:
            assert merged[key] == whole[key]


@pytest.mark.parametrize("chunksize", [None, 1, 2, 3, 100])
def test_summarize_frame_independent_of_chunking(chunksize) -> None:
    frame = pd.DataFrame(
        {
            "a": [1, 4, 2, 3, 10],
            "b": [0.5, np.nan, 0.5, 2.0, -1.0],
        }
    )
    result = summarize_frame(frame, chunksize=chunksize)
    assert list(result.index) == ["a", "b"]
    assert list(result.columns) == list(SUMMARY_FIELDS)

    a = result.loc["a"]
    assert a["count"] == 5
    assert a["min"] == 1 and a["max"] == 10
    assert a["median"] == 3.0
    assert a["mean"] == pytest.approx(4.0)

    b = result.loc["b"]
    assert b["nulls"] == 1
    assert b["mode"] == 0.5
    assert b["median"] == 0.5
    assert b["cardinality"] == 3


def test_summarize_empty_frame() -> None:
    frame = pd.DataFrame({"x": pd.Series([], dtype=float)})
    result = summarize_frame(frame)
    assert result.loc["x", "count"] == 0


def test_summarize_frame_rejects_bad_chunksize() -> None:
    with pytest.raises(ValueError):
        summarize_frame(pd.DataFrame({"x": [1]}), chunksize=0)


@pytest.mark.parametrize("chunksize", [None, 1, 2])
def test_summarize_frame_mean_ignores_nulls_in_every_chunking(chunksize) -> None:
    # With chunksize=1 the trailing chunks hold nothing but nulls.
    frame = pd.DataFrame({"x": [4.0, np.nan, np.nan], "y": [np.nan, 1.0, 3.0]})
    result = summarize_frame(frame, chunksize=chunksize)

    x = result.loc["x"]
    assert x["count"] == 3
    assert x["nulls"] == 2
    assert x["mean"] == pytest.approx(4.0)
    assert x["variance"] == pytest.approx(0.0)

    y = result.loc["y"]
    assert y["mean"] == pytest.approx(2.0)
    assert y["variance"] == pytest.approx(1.0)


def test_null_only_summary_merges_as_identity_for_moments() -> None:
    present = Summary.from_iterable([2.0, 6.0])
    present.merge(Summary.from_iterable([None, float("nan")]))
    stats = present.to_dict()
    assert stats["count"] == 4
    assert stats["nulls"] == 2
    assert stats["mean"] == pytest.approx(4.0)
    assert stats["variance"] == pytest.approx(4.0)


def test_rejected_sample_leaves_parts_consistent() -> None:
    summary = Summary.from_iterable([1, 2])
    with pytest.raises(TypeError):
        summary.add("a")
    lengths = {
        len(summary.minmax),
        len(summary.moments),
        len(summary.frequencies),
        len(summary.order),
    }
    assert lengths == {2}
    assert len(summary) == 2
    assert summary.minmax.max() == 2
