"""
FRA DSS Assistant

Keyword-driven guidance on government welfare schemes for rural and
forest-dwelling communities, with rule-based per-village recommendations.
"""

__version__ = "1.0.0"
__author__ = "FRA DSS Team"
__description__ = "Scheme guidance chat assistant for forest-dwelling communities"
