"""
DataFrame utilities subpackage - requires polars.

Element count tables and range filters for collections of formulas.
"""

from chemeval.df.filters import (
    formula_frame,
    filter_element_range,
)

__all__ = [
    "formula_frame",
    "filter_element_range",
]
