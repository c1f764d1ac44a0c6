"""
DataFrame utilities for formulas - requires polars.

Turn formula strings into per-element count columns and filter on them.
"""

__all__ = [
    "formula_frame",
    "filter_element_range",
]

from collections.abc import Iterable
from typing import Optional

import polars as pl
from loguru import logger

from chemeval.config import CONFIG
from chemeval.core.molecule import Molecule
from chemeval.text.formula import parse_formula


def formula_frame(
    formulas: Iterable[str],
    column: Optional[str] = None,
) -> pl.DataFrame:
    """
    Build a DataFrame of element counts, one row per formula.

    Args:
        formulas: Formula strings to parse
        column: Name of the column holding the formulas
                (defaults to CONFIG["formula_column"])

    Returns:
        DataFrame with the formula column followed by one Int64 column per
        element, in Hill order; absent elements count as 0

    Raises:
        MalformedFormulaError: If any formula cannot be tokenized
        ValueError: If the formula column name is also an element symbol

    Example:
        >>> formula_frame(["H2O", "CH4"])
        shape: (2, 4)
        ┌─────┬─────┬─────┬─────┐
        │ mf  ┆ C   ┆ H   ┆ O   │
        │ --- ┆ --- ┆ --- ┆ --- │
        │ str ┆ i64 ┆ i64 ┆ i64 │
        ╞═════╪═════╪═════╪═════╡
        │ H2O ┆ 0   ┆ 2   ┆ 1   │
        │ CH4 ┆ 1   ┆ 4   ┆ 0   │
        └─────┴─────┴─────┴─────┘
    """
    column = column or CONFIG["formula_column"]
    formulas = list(formulas)
    molecules = [parse_formula(formula) for formula in formulas]

    seen = Molecule([(atom, 1) for molecule in molecules for atom in molecule])
    if column in seen:
        raise ValueError(f"Formula column {column!r} clashes with an element column")

    series = [pl.Series(column, formulas, dtype=pl.Utf8)]
    for element in seen.hill_order():
        series.append(
            pl.Series(element, [m.get(element, 0) for m in molecules], dtype=pl.Int64)
        )

    logger.debug(f"Built formula frame with {len(formulas)} rows, {len(seen)} elements")
    return pl.DataFrame(series)


def filter_element_range(
    df: pl.DataFrame,
    element: str,
    min_count: Optional[int] = None,
    max_count: Optional[int] = None,
) -> pl.DataFrame:
    """
    Filter DataFrame rows by element count range (inclusive).

    Args:
        df: DataFrame as returned by formula_frame
        element: Element column to filter on; a missing column counts as 0
        min_count: Minimum count (inclusive), None for no minimum
        max_count: Maximum count (inclusive), None for no maximum

    Returns:
        Filtered DataFrame
    """
    if min_count is None and max_count is None:
        return df

    col_expr = pl.col(element) if element in df.columns else pl.lit(0)

    # Build condition
    conditions = []
    if min_count is not None:
        conditions.append(col_expr >= min_count)
    if max_count is not None:
        conditions.append(col_expr <= max_count)

    combined = conditions[0]
    for cond in conditions[1:]:
        combined = combined & cond

    return df.filter(combined)
