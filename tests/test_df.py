import polars as pl
import pytest

from chemeval import MalformedFormulaError
from chemeval.df import filter_element_range, formula_frame


@pytest.fixture
def frame():
    return formula_frame(["H2O", "CH4", "C6H12O6", "NaCl"])


def test_formula_frame_columns(frame):
    assert frame.columns == ["mf", "C", "H", "Cl", "Na", "O"]
    assert frame.schema["mf"] == pl.Utf8
    assert frame.schema["C"] == pl.Int64


def test_formula_frame_counts(frame):
    assert frame["mf"].to_list() == ["H2O", "CH4", "C6H12O6", "NaCl"]
    assert frame["C"].to_list() == [0, 1, 6, 0]
    assert frame["H"].to_list() == [2, 4, 12, 0]
    assert frame["O"].to_list() == [1, 0, 6, 0]
    assert frame["Na"].to_list() == [0, 0, 0, 1]


def test_formula_frame_custom_column():
    df = formula_frame(iter(["H2O"]), column="formula")
    assert df.columns == ["formula", "H", "O"]


def test_formula_frame_empty():
    df = formula_frame([])
    assert df.columns == ["mf"]
    assert df.height == 0


def test_formula_frame_column_clash():
    with pytest.raises(ValueError):
        formula_frame(["CO2"], column="C")


def test_formula_frame_malformed():
    with pytest.raises(MalformedFormulaError):
        formula_frame(["H2O", "(CH4"])


def test_filter_element_range(frame):
    assert filter_element_range(frame, "C", min_count=1)["mf"].to_list() == [
        "CH4",
        "C6H12O6",
    ]
    assert filter_element_range(frame, "H", min_count=2, max_count=4)[
        "mf"
    ].to_list() == ["H2O", "CH4"]
    assert filter_element_range(frame, "O", max_count=0)["mf"].to_list() == [
        "CH4",
        "NaCl",
    ]


def test_filter_element_range_inactive(frame):
    assert filter_element_range(frame, "C").equals(frame)


def test_filter_element_range_missing_column(frame):
    assert filter_element_range(frame, "N", max_count=0).height == 4
    assert filter_element_range(frame, "N", min_count=1).height == 0
