"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- BirthDate: Validated date of birth with YYYY-MM-DD formatting and age derivation
"""

from .birth_date import BirthDate, parse_date, format_date, compute_age

__all__ = ["BirthDate", "parse_date", "format_date", "compute_age"]
