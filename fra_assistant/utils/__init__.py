"""
Utility functions for the FRA DSS Assistant
"""

from .validators import (
    find_duplicate_ids,
    find_blank_keywords,
    find_unresolved_scheme_ids
)

__all__ = [
    "find_duplicate_ids",
    "find_blank_keywords",
    "find_unresolved_scheme_ids"
]
