"""
Library configuration and constants.

All tunables live in CONFIG so callers and the CLI read them from one place.
"""

from typing import Any, Dict, Tuple

__all__ = ["CONFIG", "SUBSCRIPT_DIGITS", "HILL_FIRST"]

CONFIG: Dict[str, Any] = {
    # Package Metadata
    "app_name": "chemeval",
    # Parsing
    "parse_cache_size": 256,  # Entries kept by parse_cached
    # DataFrames
    "formula_column": "mf",  # Default column holding formula strings
    # Logging (CLI only, the library is silent unless enabled)
    "log_level": "INFO",
    "log_level_verbose": "DEBUG",
    "log_format": "<level>{level: <8}</level> | {name}:{function} - {message}",
}

# Unicode subscript digits accepted by normalize_subscripts
SUBSCRIPT_DIGITS = "₀₁₂₃₄₅₆₇₈₉"

# Hill notation puts carbon then hydrogen first when carbon is present
HILL_FIRST: Tuple[str, ...] = ("C", "H")
